from dataclasses import dataclass


class UrlNormalizer:
    """Strategy interface."""
    def normalize(self, s: str) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class DefaultSchemeUrlNormalizer(UrlNormalizer):
    """
    Anything that already starts with "http" is left alone (http://, https://, even "httpbin.org").
    Everything else gets the default scheme prepended.
    """
    default_scheme: str = "https"

    def normalize(self, s: str) -> str:
        s = (s or "").strip()
        if not s:
            return ""

        if s.startswith("http"):
            return s

        return f"{self.default_scheme}://" + s

from typing import Any, Dict, Iterable, List, Mapping, Optional

from zerosetup.config import TARGET_PACKAGE

LINTER = "eslint"
FORMATTER = "prettier"

# family -> (exact names, prefixes, scopes, infix fragments)
PATTERNS = {
    LINTER: (
        frozenset({"eslint"}),
        ("eslint-",),
        ("@eslint/", "@typescript-eslint/"),
        ("eslint-plugin-", "eslint-config-"),
    ),
    FORMATTER: (
        frozenset({"prettier"}),
        ("prettier-",),
        ("@prettier/",),
        (),
    ),
}


def _section(manifest: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = manifest.get(key)
    return value if isinstance(value, dict) else {}


class DependencyClassifier:
    """Name-based detection of ESLint/Prettier packages. Versions are never inspected."""

    def __init__(self, protected: Iterable[str] = (TARGET_PACKAGE,)):
        self.protected = frozenset(protected)

    def family(self, name: str) -> Optional[str]:
        """Returns the legacy tool a package belongs to, checking the linter first."""
        if name in self.protected:
            return None
        for family, (exact, prefixes, scopes, infixes) in PATTERNS.items():
            if (
                name in exact
                or name.startswith(prefixes)
                or name.startswith(scopes)
                or any(fragment in name for fragment in infixes)
            ):
                return family
        return None

    def matches(self, name: str) -> bool:
        return self.family(name) is not None

    def classify(self, manifest: Mapping[str, Any]) -> List[str]:
        """
        Returns the legacy toolchain packages declared in `dependencies` and
        `devDependencies`, in declaration order, each name at most once.
        """
        seen = set()
        result: List[str] = []
        for section in ("dependencies", "devDependencies"):
            for name in _section(manifest, section):
                if name in seen:
                    continue
                seen.add(name)
                if self.matches(name):
                    result.append(name)
        return result

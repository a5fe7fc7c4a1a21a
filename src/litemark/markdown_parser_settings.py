"""Parser settings, optionally loaded from a JSON file."""

from dataclasses import dataclass, field, replace
import json
from typing import Any, Dict

from litemark.markdown_error import MarkdownSettingsError
from litemark.markdown_feature import MarkdownFeatureSet


DEFAULT_FENCE = "```"


@dataclass(frozen=True)
class MarkdownParserSettings:
    """
    Settings that control a parse.

    Settings are immutable.  `with_features` and `dataclasses.replace` derive changed
    copies, and the fence is checked again for each copy.

    Attributes:
        features: The syntaxes to recognise
        fence: The exact line that opens and closes a code block
    """
    features: MarkdownFeatureSet = field(default_factory=MarkdownFeatureSet.standard)
    fence: str = DEFAULT_FENCE

    def __post_init__(self) -> None:
        if not self.fence or any(ch.isspace() for ch in self.fence):
            raise MarkdownSettingsError(
                f"Code block fence must be non-empty and contain no whitespace: {self.fence!r}",
                key="fence",
                value=self.fence
            )

    @classmethod
    def create_default(cls) -> "MarkdownParserSettings":
        """Create settings with the standard features and the default fence."""
        return cls(features=MarkdownFeatureSet.standard(), fence=DEFAULT_FENCE)

    def with_features(self, features: MarkdownFeatureSet) -> "MarkdownParserSettings":
        """Return a copy of these settings with a different feature set."""
        return replace(self, features=features)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarkdownParserSettings":
        """
        Build settings from a decoded JSON object.

        Args:
            data: A mapping that may hold "features" and "fence"

        Returns:
            Settings with defaults for anything not given

        Raises:
            MarkdownSettingsError: If a value has the wrong shape
        """
        if not isinstance(data, dict):
            raise MarkdownSettingsError("Settings must be a JSON object", value=data)

        settings = cls.create_default()

        if "features" in data:
            features = data["features"]
            if isinstance(features, str):
                try:
                    settings = replace(settings, features=MarkdownFeatureSet.preset(features))

                except KeyError as e:
                    raise MarkdownSettingsError(
                        f"Unknown feature preset: {features!r}, expected one of {', '.join(MarkdownFeatureSet.PRESETS)}",
                        key="features",
                        value=features
                    ) from e

            elif isinstance(features, list):
                settings = replace(settings, features=MarkdownFeatureSet.from_names(str(name) for name in features))

            else:
                raise MarkdownSettingsError(
                    "Features must be a preset name or a list of feature names", key="features", value=features
                )

        if "fence" in data:
            fence = data["fence"]
            if not isinstance(fence, str):
                raise MarkdownSettingsError("Code block fence must be a string", key="fence", value=fence)

            settings = replace(settings, fence=fence)

        return settings

    @classmethod
    def load(cls, path: str) -> "MarkdownParserSettings":
        """
        Load settings from file.

        Args:
            path: Path to the settings file

        Returns:
            MarkdownParserSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            MarkdownSettingsError: If the JSON does not describe valid settings
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a JSON compatible dictionary."""
        return {
            "features": self.features.names(),
            "fence": self.fence
        }

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to the settings file
        """
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

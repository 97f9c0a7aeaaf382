"""Configuration rules — YAML, JSON and INI files."""

from fsaudit.classification.models import ConfigurationKind, configuration
from fsaudit.rules.models import ClassificationRule

YAML_CONFIG = ClassificationRule(
    id="YAML_CONFIG",
    name="YAML File",
    description="YAML configuration files.",
    classification=configuration(ConfigurationKind.YAML),
    extensions=["yaml", "yml"],
)

JSON_CONFIG = ClassificationRule(
    id="JSON_CONFIG",
    name="JSON File",
    description="JSON configuration files.",
    classification=configuration(ConfigurationKind.JSON),
    extensions=["json"],
)

INI_CONFIG = ClassificationRule(
    id="INI_CONFIG",
    name="INI File",
    description="INI configuration files.",
    classification=configuration(ConfigurationKind.INI),
    extensions=["ini"],
)

ALL_CONFIGURATION_RULES = [YAML_CONFIG, JSON_CONFIG, INI_CONFIG]

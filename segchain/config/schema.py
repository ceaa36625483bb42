#!/usr/bin/env python3
"""
Configuration schema definition for validation
"""
from typing import Dict, Any, List


class ConfigSchema:
    """Configuration schema for validation"""

    SCHEMA = {
        'logging': {
            'level': {'type': str, 'required': False},
            'format': {'type': str, 'required': False},
            'log_dir': {'type': str, 'required': False},
        },
        'algebra': {
            'merge_adjacent': {'type': bool, 'required': True},
        },
    }

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> List[str]:
        """Validate configuration against schema

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        # Check required fields
        for section, fields in cls.SCHEMA.items():
            if any(props.get('required', False) for _, props in fields.items()):
                if section not in config:
                    errors.append(f"Missing required configuration section: {section}")
                    continue

            if section not in config:
                continue

            section_config = config[section]
            if not isinstance(section_config, dict):
                errors.append(f"Configuration section {section} must be a mapping")
                continue

            for field, props in fields.items():
                if props.get('required', False) and field not in section_config:
                    errors.append(f"Missing required configuration field: {section}.{field}")

        # Validate field types
        for section, fields in cls.SCHEMA.items():
            section_config = config.get(section)
            if not isinstance(section_config, dict):
                continue

            for field, props in fields.items():
                if field in section_config and 'type' in props:
                    expected_type = props['type']
                    if not isinstance(section_config[field], expected_type):
                        errors.append(
                            f"Invalid type for {section}.{field}: expected {expected_type.__name__}, "
                            f"got {type(section_config[field]).__name__}"
                        )

        return errors

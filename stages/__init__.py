"""Form stage module"""

import importlib
from typing import Dict, Any, Optional

# Form fields, in display order
STAGE_MODULES = [
    "age",
    "size"
]

def load_stage(stage_id: str):
    """Dynamically load a stage module"""
    if stage_id not in STAGE_MODULES:
        return None
    return importlib.import_module(f"stages.{stage_id}")

def get_stage_config(stage_id: str) -> Optional[Dict[str, Any]]:
    """Get stage configuration"""
    stage_module = load_stage(stage_id)
    if stage_module:
        return stage_module.STAGE_CONFIG
    return None

def validate_stage_input(stage_id: str, value) -> bool:
    """Validate stage input"""
    stage_module = load_stage(stage_id)
    if stage_module:
        return stage_module.validate_input(value)
    return True

def get_stage_error(stage_id: str, value) -> str:
    """Get the error message for an invalid value"""
    stage_module = load_stage(stage_id)
    if stage_module:
        return stage_module.get_error_message(value)
    return "Invalid value"

def get_stage_data(stage_id: str) -> Dict[str, Any]:
    """Get stage data (dropdown options)"""
    stage_module = load_stage(stage_id)
    if stage_module and hasattr(stage_module, 'get_stage_data'):
        return stage_module.get_stage_data()
    return {}

def get_form() -> list:
    """Describe every form field"""
    return [
        {**get_stage_config(stage_id), "data": get_stage_data(stage_id)}
        for stage_id in STAGE_MODULES
    ]

def validate_form(values: Dict[str, Any]) -> Dict[str, str]:
    """Validate all fields, returning error messages keyed by stage id"""
    errors = {}
    for stage_id in STAGE_MODULES:
        value = values.get(stage_id)
        if not validate_stage_input(stage_id, value):
            errors[stage_id] = get_stage_error(stage_id, value)
    return errors

def parse_form(values: Dict[str, Any]) -> Dict[str, Any]:
    """Convert validated raw values into typed ones"""
    return {
        stage_id: load_stage(stage_id).parse_input(values.get(stage_id))
        for stage_id in STAGE_MODULES
    }

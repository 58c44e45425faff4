"""Stage 1: Dog Age"""

import math
from app.config import settings

STAGE_CONFIG = {
    "stage_id": "age",
    "stage_number": 1,
    "question": "Dog's Age (years)",
    "type": "number",
    "placeholder": "e.g., 5",
    "validation": {
        "exclusive_min_value": 0,
        "max_value": settings.max_dog_age,
        "type": "number",
        "error_message": "Age must be a positive number."
    }
}

TOO_OLD_MESSAGE = "That's a very old dog!"

def parse_input(value) -> float:
    """Coerce a raw form value to a number"""
    if isinstance(value, bool):
        raise ValueError("Age must be a number")
    if isinstance(value, str):
        value = value.strip()
    age = float(value)
    if math.isnan(age) or math.isinf(age):
        raise ValueError("Age must be a finite number")
    return age

def validate_input(value) -> bool:
    """Validate input for this stage"""
    try:
        age = parse_input(value)
    except (TypeError, ValueError):
        return False
    return 0 < age <= settings.max_dog_age

def get_error_message(value) -> str:
    try:
        age = parse_input(value)
    except (TypeError, ValueError):
        return STAGE_CONFIG["validation"]["error_message"]
    if age > settings.max_dog_age:
        return TOO_OLD_MESSAGE
    return STAGE_CONFIG["validation"]["error_message"]

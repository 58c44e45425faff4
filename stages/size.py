"""Stage 2: Dog Size"""

from app.age_converter import DogSize

STAGE_CONFIG = {
    "stage_id": "size",
    "stage_number": 2,
    "question": "Dog Size",
    "type": "dropdown",
    "placeholder": "Select a size",
    "options": [size.value for size in DogSize]
}

OPTION_LABELS = {
    DogSize.SMALL: "Small (0-20 lbs)",
    DogSize.MEDIUM: "Medium (21-50 lbs)",
    DogSize.LARGE: "Large (51+ lbs)"
}

def parse_input(value) -> DogSize:
    return DogSize(value.strip().lower())

def validate_input(value) -> bool:
    """Validate input for this stage"""
    if not isinstance(value, str):
        return False
    return value.strip().lower() in STAGE_CONFIG["options"]

def get_error_message(value) -> str:
    return "You need to select a dog size."

def get_stage_data() -> dict:
    """Get dropdown options for this stage"""
    return {
        "dropdown": [
            {"value": size.value, "label": label}
            for size, label in OPTION_LABELS.items()
        ]
    }

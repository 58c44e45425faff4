from pydantic import BaseModel
from typing import Optional, Dict, Any, List, Union
from enum import Enum
from app.age_converter import DogSize

class SubmissionState(str, Enum):
    FORM = "form"
    LOADING = "loading"
    RESULTS = "results"

class DogFactOutput(BaseModel):
    fact: str

class Notification(BaseModel):
    title: str
    description: str
    variant: str = "default"

class SubmissionSnapshot(BaseModel):
    state: SubmissionState = SubmissionState.FORM
    dog_age: Optional[float] = None
    dog_size: Optional[DogSize] = None
    human_age: Optional[int] = None
    dog_fact: Optional[DogFactOutput] = None
    error: Optional[str] = None

class ConvertRequest(BaseModel):
    age: Union[float, str] = ""
    size: str = ""

class ConvertResponse(BaseModel):
    success: bool
    human_age: Optional[int] = None
    errors: Dict[str, str] = {}

class APIRequest(BaseModel):
    session_id: str
    action: str = "state"
    age: Union[float, str] = ""
    size: str = ""

class APIResponse(BaseModel):
    success: bool
    session_id: str
    state: SubmissionState
    human_age: Optional[int] = None
    dog_fact: Optional[DogFactOutput] = None
    error: Optional[str] = None
    errors: Dict[str, str] = {}
    notifications: List[Notification] = []
    data: Dict[str, Any] = {}

from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Shared configuration: validated on assignment, buildable from attributes."""
    model_config = ConfigDict(validate_assignment=True, from_attributes=True)

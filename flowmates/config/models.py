from pydantic import BaseModel, Field


class FlowmatesConfig(BaseModel):
    """Contents of ~/.flowmates/config.json."""

    repo_path: str = Field(description="Absolute path to the flowmates content repository")

"""PWA plugin configuration."""

from pydantic import BaseModel, ConfigDict, Field


class PwaConfig(BaseModel):
    """Progressive web app options passed through to the site build."""

    model_config = ConfigDict(extra="forbid")

    service_worker: bool = Field(True, description="Register a service worker")
    update_popup: bool = Field(False, description="Show a popup when new content is available")

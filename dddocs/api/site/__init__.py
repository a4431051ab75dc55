"""Site API domain."""

from .._output_schemas.site import SiteShowOutput
from .build_head import build_head
from .build_site_config import build_site_config

__all__ = ["SiteShowOutput", "build_head", "build_site_config"]

"""Sidebar API domain."""

from .._output_schemas.sidebar import SidebarShowOutput
from .generate_sidebar import generate_sidebar
from .SidebarGroup import SidebarGroup, SidebarLink

__all__ = ["SidebarGroup", "SidebarLink", "SidebarShowOutput", "generate_sidebar"]

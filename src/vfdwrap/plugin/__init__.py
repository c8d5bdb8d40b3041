"""Plugin — host build-pipeline integration for the toNative rewrite.

Public API
----------
.. autofunction:: plugin_vfd
.. autofunction:: plugin_options
"""

from vfdwrap.plugin.adapter import VfdPlugin, plugin_vfd
from vfdwrap.plugin.options import PluginOptions, plugin_options

__all__ = [
    "plugin_vfd",
    "plugin_options",
    "PluginOptions",
    "VfdPlugin",
]

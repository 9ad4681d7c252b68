"""borrowr: pull components from remote registries into a project.

Import from submodules:
- version: __version__
- registry: index models, loader, resolver, fetcher
- core: block specs, installer, dependency aggregation, context
"""

from borrowr.version import __version__ as __version__

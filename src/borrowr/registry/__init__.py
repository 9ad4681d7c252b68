"""Registry index handling.

Import from submodules:
- models: RegistryEntry, RegistryIndex, TopLevelIndex, FetchedEntry
- loader: load_registry_index, load_top_level_index, raw_github_base_url
- resolver: resolve_tree
- fetcher: fetch_tree
"""

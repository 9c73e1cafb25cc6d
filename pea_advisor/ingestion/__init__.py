"""
File loaders used by the CLI.

Modules
-------
catalog_json : load_catalog() + parse_catalog_records(): JSON asset catalogs.
profile_file : load_profile(): TOML / JSON investor profiles.
"""

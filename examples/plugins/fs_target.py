"""Example target plugin: back up a set of local directories."""

from shieldplugin import Config, Endpoint


class FilesystemTarget:
    """Reads include/exclude lists and tar options from an endpoint."""

    description = "Archive local directories"

    def plan(self, raw: str, config: Config | None = None) -> dict:
        endpoint = Endpoint.from_json(raw, config=config)
        options = endpoint.get_map("tar_options") if "tar_options" in endpoint else {}
        return {
            "base_dir": endpoint.get_string("base_dir"),
            "include": endpoint.get_string_list_default("include", ["*"]),
            "exclude": endpoint.get_string_list_default("exclude", []),
            "tar_options": options,
            "log_endpoint": endpoint.redacted(),
        }

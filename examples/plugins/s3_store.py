"""Example store plugin: resolve S3 connection settings from an endpoint."""

from shieldplugin import Endpoint, MissingKeyError, parse_endpoint


class S3Store:
    """Reads the endpoint keys an S3-compatible store needs.

    Demonstrates the usual split between required keys (plain getters,
    absence is fatal) and optional keys (``*_default`` getters).
    """

    description = "Store backup archives in an S3-compatible bucket"

    def settings(self, endpoint: Endpoint) -> dict:
        """Collect connection settings, applying defaults for optional keys."""
        return {
            "bucket": endpoint.get_string("bucket"),
            "access_key_id": endpoint.get_string("access_key_id"),
            "secret_access_key": endpoint.get_string("secret_access_key"),
            "region": endpoint.get_string_default("region", "us-east-1"),
            "port": int(endpoint.get_number_default("port", 443)),
            "skip_ssl_validation": endpoint.get_boolean_default("skip_ssl_validation", False),
        }

    def validate(self, raw: str) -> list[str]:
        """Return a list of human-readable problems; empty when the endpoint is usable."""
        endpoint = parse_endpoint(raw)
        problems = []
        for key in ("bucket", "access_key_id", "secret_access_key"):
            try:
                endpoint.get_string(key)
            except MissingKeyError:
                problems.append(f"{key}: required")
        return problems

from identgen.config import Config
from identgen.core.modules.ident.service import IdentService


class Core:
    """Container providing config and the service instances built from it."""

    config: Config
    ident: IdentService

    def __init__(self, config: Config) -> None:
        """Initialize core with config and the file-backed identifier service."""
        self.config = config
        self.ident = IdentService(config.state_path, config.table)

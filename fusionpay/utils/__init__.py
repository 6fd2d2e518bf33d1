from .config_loader import DEFAULT_STATUS_URL, FusionPayConfig, load_config

__all__ = ["DEFAULT_STATUS_URL", "FusionPayConfig", "load_config"]

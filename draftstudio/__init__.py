"""draftstudio - draft, preview and publish git-hosted content."""

__version__ = "0.1.0"

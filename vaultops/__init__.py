"""vaultops: team secrets on HashiCorp Vault from the command line."""

__version__ = "0.1.0"

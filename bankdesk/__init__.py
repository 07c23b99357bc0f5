"""Console bank desk with Caesar-enciphered customer storage and backups, plus small console exercises."""

__version__ = "0.1.0"
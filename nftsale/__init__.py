"""Fixed-price NFT sale, NFT receiver and non-transferable collection contract logic."""

__version__ = "0.20.0"
__all__ = ["cosmos", "errors", "fixed_price", "non_transferable", "receiver"]
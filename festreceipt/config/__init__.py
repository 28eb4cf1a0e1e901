"""Configuration models and loading for festreceipt."""

from .model import AppConfig, Donation, ReceiptConfig, UPIConfig
from .loader import load_config

__all__ = ["AppConfig", "Donation", "ReceiptConfig", "UPIConfig", "load_config"]

from teachable_dashboard.api.teachable import TeachableClient

__all__ = ["TeachableClient"]

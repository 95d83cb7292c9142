"""kuberviz - visualize how pods consume Kubernetes node capacity."""

__version__ = "0.1.0"

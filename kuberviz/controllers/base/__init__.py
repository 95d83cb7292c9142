"""Base controller classes."""

from kuberviz.controllers.base.base_controller import BaseController, WorkerResult

__all__ = ["BaseController", "WorkerResult"]

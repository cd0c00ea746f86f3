"""
MVVM ViewModel Infrastructure.

Base class for view-models that mix BindableProperty descriptors with
hand-written properties carrying side effects (e.g. expansion cascades).
"""
from typing import Any

from lazytree.ui.mvvm.bindable import BindableProperty, BindableBase


class BaseViewModel(BindableBase):
    """
    Base class for ViewModels.

    Use BindableProperty for plain state. For properties whose setter does
    more than store a value, keep the field private and call ``set_field``,
    which stores and notifies only when the value actually changes.

    Example:
        class MyViewModel(BaseViewModel):
            busyChanged = Signal(bool)

            @property
            def busy(self):
                return self._busy

            @busy.setter
            def busy(self, value):
                if self.set_field("_busy", "busy", value, self.busyChanged):
                    self._start_spinner()
    """

    def set_field(self, attr_name: str, property_name: str, value: Any, signal=None) -> bool:
        """
        Store ``value`` in ``attr_name`` and emit notifications if it changed.

        Args:
            attr_name: Backing attribute on the instance.
            property_name: Name reported through ``propertyChanged``.
            value: New value.
            signal: Optional specific signal emitted with the new value.

        Returns:
            True if the value changed.
        """
        if getattr(self, attr_name, None) == value:
            return False
        setattr(self, attr_name, value)
        if signal is not None:
            signal.emit(value)
        self.on_property_changed(property_name, value)
        return True

    def on_property_changed(self, property_name: str, value: Any) -> None:
        """Emit a property changed notification for a manual property."""
        self.propertyChanged.emit(property_name, value)


__all__ = ["BaseViewModel", "BindableBase", "BindableProperty"]

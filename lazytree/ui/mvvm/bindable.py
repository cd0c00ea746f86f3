"""
WPF-Style Bindable Property Descriptor.

Provides automatic signal emission on property change for view-models.

Usage:
    class NodeViewModel(BindableBase):
        selectedChanged = Signal(bool)
        is_selected = BindableProperty(default=False, signal_name="selectedChanged")

    # Changing the property emits selectedChanged and propertyChanged
    vm.is_selected = True
"""
from typing import Any, Optional, Callable, TypeVar, Generic
from PySide6.QtCore import QObject, Signal

T = TypeVar('T')


class BindableProperty(Generic[T]):
    """
    Descriptor that emits a signal when the property value changes.

    Inspired by WPF's INotifyPropertyChanged pattern.

    Args:
        default: Default value for the property.
        signal_name: Optional custom signal name. Defaults to "{property_name}Changed".
        coerce: Optional callable to coerce/validate the value before setting.
        on_change: Optional name of a method called with the new value after
            the signals were emitted.
    """

    def __init__(
        self,
        default: T = None,
        signal_name: Optional[str] = None,
        coerce: Optional[Callable[[Any], T]] = None,
        on_change: Optional[str] = None
    ):
        self.default = default
        self._signal_name = signal_name
        self.coerce = coerce
        self.on_change = on_change
        self._attr_name: str = ""
        self._public_name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._public_name = name
        self._attr_name = f"_bindable_{name}"

        # Signals must be class attributes on the QObject subclass; the
        # descriptor only looks them up by name.
        if not self._signal_name:
            self._signal_name = f"{name}Changed"

    @property
    def name(self) -> str:
        return self._public_name

    def __get__(self, obj: Optional[QObject], objtype: type = None) -> T:
        if obj is None:
            return self  # type: ignore
        return getattr(obj, self._attr_name, self.default)

    def __set__(self, obj: QObject, value: Any) -> None:
        """Set the property value and emit change signals if different."""
        if self.coerce is not None:
            value = self.coerce(value)

        old_value = getattr(obj, self._attr_name, self.default)
        if old_value == value:
            return

        setattr(obj, self._attr_name, value)

        specific_signal = getattr(obj, self._signal_name, None)
        if specific_signal is not None and callable(getattr(specific_signal, 'emit', None)):
            specific_signal.emit(value)

        generic_signal = getattr(obj, 'propertyChanged', None)
        if generic_signal is not None and callable(getattr(generic_signal, 'emit', None)):
            generic_signal.emit(self._public_name, value)

        if self.on_change:
            getattr(obj, self.on_change)(value)


class BindableBase(QObject):
    """
    Base class for view-models with property change notification.

    Provides a generic ``propertyChanged(name, value)`` signal, emitted by
    every ``BindableProperty`` and by ``notify_property_changed``.
    """

    # Generic signal emitted for any property change: (property_name, new_value)
    propertyChanged = Signal(str, object)

    def notify_property_changed(self, property_name: str, value: Any) -> None:
        """
        Manually emit a property changed notification.

        Use this for properties not backed by a BindableProperty descriptor.
        """
        self.propertyChanged.emit(property_name, value)

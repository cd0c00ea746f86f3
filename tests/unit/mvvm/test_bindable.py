"""
Unit tests for BindableProperty / BaseViewModel change notification.
"""
from unittest.mock import MagicMock

from PySide6.QtCore import Signal

from lazytree.ui.mvvm.bindable import BindableProperty, BindableBase
from lazytree.ui.mvvm.viewmodel import BaseViewModel


class CounterVM(BindableBase):
    countChanged = Signal(object)
    count = BindableProperty(default=0)
    clamped = BindableProperty(default=0, coerce=lambda x: max(0, int(x)))


class HookVM(BaseViewModel):
    flagChanged = Signal(bool)
    flag = BindableProperty(default=False, on_change="_flag_changed")

    def __init__(self):
        super().__init__()
        self.seen = []

    def _flag_changed(self, value):
        self.seen.append(value)


class TestBindableProperty:

    def test_default_value(self):
        vm = CounterVM()
        assert vm.count == 0

    def test_emits_property_changed(self):
        vm = CounterVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.count = 5

        callback.assert_called_once_with("count", 5)

    def test_emits_specific_signal(self):
        vm = CounterVM()
        callback = MagicMock()
        vm.countChanged.connect(callback)

        vm.count = 7

        callback.assert_called_once_with(7)

    def test_no_emit_when_unchanged(self):
        vm = CounterVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.count = 0

        callback.assert_not_called()

    def test_coerce(self):
        vm = CounterVM()
        vm.clamped = -10
        assert vm.clamped == 0
        vm.clamped = "3"
        assert vm.clamped == 3

    def test_instances_are_independent(self):
        a, b = CounterVM(), CounterVM()
        a.count = 1
        assert b.count == 0

    def test_on_change_hook_runs_after_store(self):
        vm = HookVM()
        vm.flag = True
        vm.flag = True
        vm.flag = False

        assert vm.seen == [True, False]


class TestBaseViewModel:

    def test_set_field_notifies_once(self):
        vm = HookVM()
        vm._busy = False
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        assert vm.set_field("_busy", "busy", True) is True
        assert vm.set_field("_busy", "busy", True) is False

        callback.assert_called_once_with("busy", True)

    def test_set_field_emits_specific_signal(self):
        vm = HookVM()
        specific = MagicMock()
        vm.flagChanged.connect(specific)

        vm.set_field("_manual", "manual", True, vm.flagChanged)

        specific.assert_called_once_with(True)

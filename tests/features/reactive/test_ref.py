"""Tests for Ref and Computed."""

import pytest
from unittest.mock import MagicMock

from neo_fetch.features.reactive import Computed, Ref, to_ref


class TestRef:
    """Observable cell behaviour."""
    
    def test_watchers_receive_new_and_old_values(self):
        """Test a change notifies watchers with (new, old)."""
        ref = Ref(1, name="page")
        watcher = MagicMock()
        ref.watch(watcher)
        
        ref.value = 2
        
        watcher.assert_called_once_with(2, 1)
        assert ref.value == 2
    
    def test_equal_value_does_not_notify(self):
        """Test writing an equal value is not a change."""
        ref = Ref([1, 2])
        watcher = MagicMock()
        ref.watch(watcher)
        
        ref.value = [1, 2]
        
        watcher.assert_not_called()
    
    def test_set_silently_skips_watchers(self):
        """Test set_silently writes without notifying."""
        ref = Ref(0)
        watcher = MagicMock()
        ref.watch(watcher)
        
        ref.set_silently(5)
        
        assert ref.value == 5
        watcher.assert_not_called()
    
    def test_stop_function_removes_watcher(self):
        """Test the callable returned by watch() unsubscribes."""
        ref = Ref(0)
        watcher = MagicMock()
        stop = ref.watch(watcher)
        
        stop()
        ref.value = 1
        
        watcher.assert_not_called()
    
    def test_watcher_may_unsubscribe_itself(self):
        """Test a watcher removing itself during notification is safe."""
        ref = Ref(0)
        seen = []
        
        def once(new, old):
            seen.append(new)
            stop()
        
        stop = ref.watch(once)
        other = MagicMock()
        ref.watch(other)
        
        ref.value = 1
        ref.value = 2
        
        assert seen == [1]
        assert other.call_count == 2
    
    def test_watcher_errors_propagate_to_writer(self):
        """Test an exception in a watcher reaches the code that wrote the value."""
        ref = Ref(0)
        ref.watch(MagicMock(side_effect=ValueError("rejected")))
        
        with pytest.raises(ValueError, match="rejected"):
            ref.value = 1


class TestComputed:
    """Derived cells."""
    
    def test_value_is_recomputed_on_read(self):
        """Test Computed reflects the current value of its sources."""
        a = Ref(2)
        b = Ref(3)
        product = Computed(lambda: a.value * b.value, name="product")
        
        assert product.value == 6
        a.value = 10
        assert product.value == 30
    
    def test_to_ref_wraps_plain_values_once(self):
        """Test to_ref wraps mappings and passes Refs through."""
        existing = Ref({"q": "a"})
        
        assert to_ref(existing) is existing
        wrapped = to_ref({"q": "b"}, name="params")
        assert isinstance(wrapped, Ref)
        assert wrapped.value == {"q": "b"}
        assert wrapped.name == "params"

import importlib
from pathlib import Path

from dispatchkit import EventArgs, EventDispatcher
from dispatchkit.loaders import load_wiring_from_json

ROOT = Path(__file__).resolve().parents[1]


def _label(target):
    return getattr(target, "__name__", type(target).__name__)


def _order_hooks(monkeypatch):
    monkeypatch.syspath_prepend(str(ROOT))
    return importlib.import_module("examples.order_hooks")


def test_order_hooks_reject_empty_orders(monkeypatch):
    hooks = _order_hooks(monkeypatch)
    dispatcher = EventDispatcher()
    hooks.register(dispatcher)

    args = dispatcher.dispatch(hooks.PRE_PLACE, EventArgs(items=[], rejected=False))
    assert args.rejected
    assert args.is_propagation_stopped()

    args = dispatcher.dispatch(hooks.PRE_PLACE, EventArgs(items=["book"], rejected=False))
    assert not args.rejected


def test_example_wiring_matches_module_registration(monkeypatch):
    hooks = _order_hooks(monkeypatch)
    from_module = EventDispatcher()
    hooks.register(from_module)
    from_json = EventDispatcher()
    load_wiring_from_json(from_json, ROOT / "examples" / "wiring.json")

    def shape(dispatcher):
        return {
            name: [_label(target) for target in listeners.values()]
            for name, listeners in dispatcher.get_listeners().items()
        }

    assert shape(from_json) == shape(from_module)

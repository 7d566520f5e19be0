import functools

from hookline.hooks import ANONYMOUS_ACTION, ActionEntry, BaseHookRegistry, action_name


def test_register_single_action() -> None:
    registry = BaseHookRegistry()

    def action(value: str) -> str:
        return value

    registry.register("test", action)

    assert registry.get_actions_batch("test") == [[action]]


def test_same_order_actions_share_batch_in_registration_order() -> None:
    registry = BaseHookRegistry()
    first = lambda value: value  # noqa: E731
    second = lambda value: value.upper()  # noqa: E731

    registry.register("test", first)
    registry.register("test", second)

    batches = registry.get_actions_batch("test")
    assert len(batches) == 1
    assert batches[0][0] is first
    assert batches[0][1] is second


def test_batches_sorted_by_order_regardless_of_registration_order() -> None:
    registry = BaseHookRegistry()
    one, two, three = (lambda v: v * 1), (lambda v: v * 2), (lambda v: v * 3)

    registry.register("test", two, 1)
    registry.register("test", one, 0)
    registry.register("test", three, 2)

    assert registry.get_actions_batch("test") == [[one], [two], [three]]


def test_negative_orders_sort_numerically() -> None:
    registry = BaseHookRegistry()
    late, early, middle = object(), object(), object()

    registry.register("x", late, 10)
    registry.register("x", early, -5)
    registry.register("x", middle, 0)
    registry.register("x", late, 2)

    assert registry.get_actions_batch("x") == [[early], [middle], [late], [late]]


def test_same_action_registered_twice_is_kept_twice() -> None:
    registry = BaseHookRegistry()

    def action() -> None:
        return None

    registry.register("test", action)
    registry.register("test", action)

    assert registry.get_actions_batch("test") == [[action, action]]


def test_unknown_hook_returns_empty_batch() -> None:
    registry = BaseHookRegistry()
    assert registry.get_actions_batch("missing") == []
    assert "missing" not in registry


def test_returned_batches_do_not_alias_store() -> None:
    registry = BaseHookRegistry()
    registry.register("test", print)

    registry.get_actions_batch("test")[0].append(len)
    registry.get_actions_batch("test").clear()

    assert registry.get_actions_batch("test") == [[print]]


def test_hooks_are_isolated_from_each_other() -> None:
    registry = BaseHookRegistry()
    registry.register("a", print)
    registry.register("b", len, 3)

    assert registry.get_actions_batch("a") == [[print]]
    assert registry.get_actions_batch("b") == [[len]]
    assert registry.hook_names() == ["a", "b"]


def test_registries_are_isolated_from_each_other() -> None:
    first = BaseHookRegistry()
    second = BaseHookRegistry()
    first.register("test", print)

    assert second.get_actions_batch("test") == []


def test_clear_removes_everything_and_is_idempotent() -> None:
    registry = BaseHookRegistry()
    registry.register("a", print)
    registry.register("b", len)

    registry.clear()
    registry.clear()

    assert registry.get_actions_batch("a") == []
    assert registry.get_actions_batch("b") == []
    assert registry.hook_names() == []


def test_clear_single_hook_keeps_others() -> None:
    registry = BaseHookRegistry()
    registry.register("a", print)
    registry.register("b", len)

    registry.clear("a")
    registry.clear("unknown")

    assert "a" not in registry
    assert registry.get_actions_batch("b") == [[len]]


def test_register_after_clear_starts_fresh() -> None:
    registry = BaseHookRegistry()
    registry.register("a", print, 5)
    registry.clear()
    registry.register("a", len)

    assert registry.get_actions_batch("a") == [[len]]


def test_logger_slot_defaults_to_none_and_can_be_swapped() -> None:
    registry = BaseHookRegistry()
    assert registry.get_logger() is None

    sink = object()
    registry.set_logger(sink)  # type: ignore[arg-type]
    assert registry.get_logger() is sink

    registry.set_logger()
    assert registry.get_logger() is None


def test_action_name_fallbacks() -> None:
    def named() -> None:
        return None

    assert action_name(named) == "named"
    assert action_name(lambda: None) == ANONYMOUS_ACTION
    assert action_name(functools.partial(named)) == ANONYMOUS_ACTION
    assert action_name(lambda: None, "explicit") == "explicit"
    assert action_name(named, "") == "named"


def test_register_label_overrides_reflected_name() -> None:
    registry = BaseHookRegistry()

    def named() -> None:
        return None

    registry.register("test", named, name="audit-writer")

    entries = registry._entry_batches("test")  # noqa: SLF001 - label lives on the entry
    assert entries == [[ActionEntry(action=named, label="audit-writer")]]
    assert entries[0][0].name == "audit-writer"

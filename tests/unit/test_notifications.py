from medihelp.report.notifications import CollectingNotifier, Notification


class TestCollectingNotifier:
    def test_collects_in_order(self) -> None:
        notifier = CollectingNotifier()
        notifier.notify(Notification("one"))
        notifier.notify(Notification("two", variant="destructive"))
        assert [n.description for n in notifier.notifications] == ["one", "two"]

    def test_drain_empties(self) -> None:
        notifier = CollectingNotifier()
        notifier.notify(Notification("one"))
        assert notifier.drain() == [Notification("one")]
        assert notifier.notifications == []

    def test_default_variant(self) -> None:
        assert Notification("x").variant == "default"

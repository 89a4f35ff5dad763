from osu_kit.observability import names
from osu_kit.observability.base import MetricsHook, NoOpMetricsHook
from osu_kit.parsers.osu_parser import OsuParser


class CountingHook:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.calls.append(name)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.calls.append(name)

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.calls.append(name)


def test_no_op_hook_satisfies_protocol() -> None:
    assert isinstance(NoOpMetricsHook(), MetricsHook)


def test_object_without_gauge_is_not_a_hook() -> None:
    class LatencyOnly:
        def record_latency(self, name: str, value_ms: float) -> None:
            pass

    assert not isinstance(LatencyOnly(), MetricsHook)


def test_parser_defaults_to_no_op_hook() -> None:
    parser = OsuParser()

    assert isinstance(parser.metrics_hook, NoOpMetricsHook)
    assert parser.parse_text("osu file format v14\n").is_valid


def test_custom_hook_sees_parser_metrics() -> None:
    hook = CountingHook()
    assert isinstance(hook, MetricsHook)

    OsuParser(metrics_hook=hook).parse_text("osu file format v14\n")

    assert names.PARSER_PARSE_DURATION in hook.calls
    assert names.PARSER_DOCUMENTS_TOTAL in hook.calls

import importlib
from datetime import date

from core import BillingCycle, Subscription
from visualization import build_category_chart, build_upcoming_chart
from analytics import build_category_frame, compute_stats


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_charts_render_for_empty_and_populated_stats():
    subscription = Subscription(
        id="1",
        name="Netflix",
        amount=15.99,
        cycle=BillingCycle.MONTHLY,
        category="Entertainment",
        next_billing_date=date(2024, 1, 17),
    )
    stats = compute_stats([subscription])

    donut = build_category_chart(build_category_frame(stats))
    bars = build_upcoming_chart(stats.upcoming, today=date(2024, 1, 10))
    empty = build_category_chart(build_category_frame(compute_stats([])))

    assert donut.data[0].type == "pie"
    assert list(bars.data[0].x) == [7]
    assert not empty.data

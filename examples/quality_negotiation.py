"""Quality Negotiation - picking offered values against caller preferences.

Loads the task requests from config/requests.yaml (or $SELECTOR_CONFIG)
and resolves each one with the nearest selector, then shows an ad-hoc
request built in code.

Run with:
    python -m examples.quality_negotiation
"""

from config import load_requests
from selector import NearestSelector, SelectionRequest, Specific, WILDCARD


if __name__ == "__main__":
    print("Quality Negotiation\n" + "=" * 50)

    loader = load_requests()
    selector = NearestSelector(strategy=loader.get_strategy())
    selector._verbose = True

    for task_id, request in loader.get_all_requests().items():
        selected = selector.select(task_id, request)
        violations = request.get_violations(selected)
        if violations:
            print(f"  violations: {violations}")

    # Stream offered in 240p/480p/1080p, caller takes anything but wants ~720p
    stream = SelectionRequest(
        available=[240, 480, 1080],
        allowed=[WILDCARD],
        preferred=[Specific(720)]
    )
    selector.select("stream", stream)

    print("\n" + "=" * 50)
    summary = selector.get_summary()
    print(f"Strategy: {summary['strategy']}")
    print(f"Tasks with no selection: {summary['empty_tasks']}")

import sys
from .scenarios import SCENARIOS
from .runner import DemoRunner

def print_raw(slots):
    print("Raw queue...")
    for slot in slots:
        marker = "" if slot.live else "  (stale)"
        print(f"  Val: {slot.value}, at: {slot.index}{marker}")
    print("")

def main():
    if len(sys.argv) != 2:
        print("Usage: python -m demo <scenario>")
        print("Available scenarios:")
        for name in SCENARIOS:
            print(f"  - {name}")
        sys.exit(1)

    scenario_name = sys.argv[1]
    if scenario_name not in SCENARIOS:
        print(f"Error: Unknown scenario '{scenario_name}'")
        sys.exit(1)

    scenario = SCENARIOS[scenario_name]

    print(f"Scenario: {scenario.name}")
    print("-" * 32)
    print(f"Description: {scenario.description}")
    print(f"Capacity: {scenario.capacity}")
    print(f"Pushes: {len(scenario.pushes)} / pops: {scenario.pops}")
    print("")

    summary = DemoRunner().run(scenario)

    print_raw(summary.raw_before)
    print_raw(summary.raw_after)

    print("Queue via size:")
    for value in summary.via_size:
        print(f"  Value: {value}")
    print("")

    print("Queue via iterators:")
    for value in summary.via_cursors:
        print(f"  Value: {value}")
    print("")

    print("Summary:")
    print(f"  final_size: {summary.final_size}")
    print(f"  popped: {summary.popped}")
    print(f"  pushes: {summary.metrics.pushes}")
    print(f"  evictions: {summary.metrics.evictions}")

if __name__ == "__main__":
    main()

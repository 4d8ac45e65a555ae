"""orbprox Quickstart — run a synthetic scenario and list close approaches."""

from orbprox import MonitorConfig, run_monitor

config = MonitorConfig.from_raw(mode="synthetic", object_count=6, seed=7, threshold_km=500)
report = run_monitor(config)

print(f"Objects:   {len(report.trajectories)}")
if report.sufficient_data:
    print(f"Closest:   {report.detection.closest_distance_km:.1f} km")
else:
    print("Closest:   --")
print(f"Threat:    {report.threat.score}% ({report.threat.category})")
print(f"Status:    {report.threat.status}")

for event in report.detection.events[:12]:
    print(f"  {event.pair_label} at step {event.time_step}, distance: {event.distance_display} km")

"""orbprox TLE screening — approximate orbits from pasted TLE text."""

from orbprox import DataMode, MonitorConfig, run_monitor

tle_text = """
ISS (ZARYA)
1 25544U 98067A   24045.54896019  .00016717  00000-0  30093-3 0  9993
2 25544  51.6412 207.4925 0004948 290.5508 178.9792 15.49583488439596
CSS (TIANHE)
1 48274U 21035A   24045.50261574  .00021540  00000-0  25163-3 0  9993
2 48274  41.4681 279.1498 0005372 149.8847 345.3740 15.62096269157018
HST
1 20580U 90037B   24045.55478014  .00001456  00000-0  73052-4 0  9994
2 20580  28.4701  41.0696 0002622 348.3544 140.2428 15.09435694872912
"""

report = run_monitor(MonitorConfig(mode=DataMode.TLE, tle_text=tle_text, threshold_km=1000.0))

print(f"Status: {report.threat.status}, threat {report.threat.score}%")
for event in report.detection.events[:12]:
    print(f"  {event.pair_label} at step {event.time_step}, distance: {event.distance_display} km")

"""Generate chart data for every range as JSON."""
import json
from points_dashboard.config import Settings, RANGE_LABELS
from points_dashboard.data import load_series
from points_dashboard.indicators import compute_headline, filter_range
from points_dashboard.ui.formatting import headline_texts

settings = Settings()
series = load_series(settings)

ranges = {}
for code in RANGE_LABELS:
    points = filter_range(series, code)
    headline = compute_headline(points)
    ranges[code] = {
        'points': len(points),
        'first_time': points[0].time if points else None,
        'headline': headline_texts(headline, settings.value_unit) if headline else None,
    }

output = {
    'series': [{'time': p.time, 'value': p.value} for p in series],
    'ranges': ranges,
}

with open('chart_data.json', 'w') as f:
    json.dump(output, f)

print(f"Saved {len(series)} observations to chart_data.json")

"""Export a static HTML snapshot of the chart and headline."""

from pathlib import Path

from points_dashboard.config import Settings
from points_dashboard.data import load_series
from points_dashboard.indicators import compute_headline, filter_range
from points_dashboard.models import Observation, RangeSelector
from points_dashboard.ui.chart import build_figure
from points_dashboard.ui.formatting import headline_texts


def render_html(points: list[Observation], unit: str = "Punkte", title: str = "Punkte") -> str:
    """Self-contained page: headline block plus a plotly chart loaded from the CDN."""
    headline = compute_headline(points)
    if headline is None:
        headline_html = '<div class="empty">Keine Daten im Zeitraum</div>'
    else:
        texts = headline_texts(headline, unit)
        headline_html = f'''
            <div class="last-value">{texts['last_value']}</div>
            <div class="change">
                <span class="{texts['style']}">{texts['change_abs']}</span>
                <span class="{texts['style']}">{texts['change_pct']}</span>
            </div>
            <div class="timestamp">{texts['last_timestamp']}</div>
        '''

    chart_html = build_figure(points).to_html(full_html=False, include_plotlyjs="cdn")

    return f'''<!DOCTYPE html>
<html lang="de">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, sans-serif;
            background: #0b0f14;
            color: #e9eef5;
            padding: 1.5rem;
        }}
        .last-value {{ font-size: 2.5rem; font-weight: 700; }}
        .change {{ font-size: 1.1rem; font-family: 'SF Mono', 'Consolas', monospace; }}
        .timestamp, .empty {{ color: #94a3b8; font-size: 0.8rem; margin-top: 0.25rem; }}
        .pos {{ color: #22c55e; }}
        .neg {{ color: #ef4444; }}
    </style>
</head>
<body>
    <div class="headline">{headline_html}</div>
    {chart_html}
</body>
</html>'''


def export_html(
    output_path: Path | str | None = None,
    selector: RangeSelector | str | None = None,
    settings: Settings | None = None,
) -> Path:
    """
    Fetch the series and write a snapshot for one range.

    Args:
        output_path: Where to save the HTML file. Defaults to dist/index.html
        selector: Range to show. Defaults to the configured default range

    Returns:
        Path to the generated file
    """
    settings = settings or Settings()
    series = load_series(settings)
    if not series:
        raise ValueError("No data available in the CSV export.")

    points = filter_range(series, selector or settings.default_range)
    html = render_html(points, settings.value_unit)

    if output_path is None:
        output_path = settings.output_dir / "index.html"
    else:
        output_path = Path(output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")

    return output_path


def main() -> None:
    """CLI entry point."""
    import argparse

    from points_dashboard.data import AcquisitionError

    parser = argparse.ArgumentParser(description="Export chart snapshot as HTML")
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output path (default: dist/index.html)"
    )
    parser.add_argument(
        "-r", "--range",
        type=str,
        default=None,
        help="Range to export (ALL, 1D, 1W, 1M, 3M, 1Y, YTD)"
    )
    args = parser.parse_args()

    try:
        path = export_html(args.output, args.range)
        print(f"Snapshot exported to: {path}")
        print(f"File size: {path.stat().st_size / 1024:.1f} KB")
    except (ValueError, AcquisitionError) as e:
        print(f"Error: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()

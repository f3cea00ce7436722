#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import timedelta
from typing import List, Optional

from sunpath.astro.horizon import compute_sun_position
from sunpath.core.time import local_day_window, parse_when, resolve_tz, tz_from_arg
from sunpath.engines.events import SUNRISE_SET_ALTITUDE_DEG, compute_solar_transit, compute_sun_rise_set


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunpath[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sunpath[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot Sun altitude and azimuth over one local day.")
    p.add_argument("--date", required=True, help="YYYY-MM-DD (local date in --tz)")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--tz", default="UTC", help="IANA zone name or UTC offset in hours")
    p.add_argument("--step-minutes", type=float, default=5.0, help="sampling step in minutes")
    p.add_argument("--out", default="sun_path.png", help="output image filename")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    tz = tz_from_arg(args.tz)
    zone = resolve_tz(tz)
    when = parse_when(args.date, tz)
    start, end = local_day_window(when, tz)

    minutes = np.arange(0.0, (end - start).total_seconds() / 60.0 + 1e-9, float(args.step_minutes))
    times = [start + timedelta(minutes=float(m)) for m in minutes]
    positions = [compute_sun_position(t, args.lat, args.lon) for t in times]
    alt = np.array([pos.altitude_deg for pos in positions], dtype=float)
    az = np.array([pos.azimuth_deg for pos in positions], dtype=float)
    hours = minutes / 60.0

    events = compute_sun_rise_set(when, args.lat, args.lon, tz)
    transit = compute_solar_transit(when, args.lat, args.lon, tz)

    fig, (ax_alt, ax_az) = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
    ax_alt.plot(hours, alt, linewidth=2, color="orange", label="altitude")
    ax_alt.axhline(SUNRISE_SET_ALTITUDE_DEG, color="gray", linestyle="--", linewidth=1, label="rise/set threshold")
    ax_alt.set_ylabel("Altitude (deg)")
    ax_alt.grid(True, alpha=0.3)

    ax_az.scatter(hours, az, s=4, color="tab:blue")
    ax_az.set_ylabel("Azimuth (deg, N=0 E=90)")
    ax_az.set_ylim(0, 360)
    ax_az.set_xlabel(f"Hours since local midnight ({zone})")
    ax_az.grid(True, alpha=0.3)

    marks = [("rise", events.rise, "green"), ("set", events.set, "red"), ("transit", transit, "black")]
    for label, t, color in marks:
        if t is None:
            print(f"{label:8s}: –")
            continue
        h = (t - start).total_seconds() / 3600.0
        for ax in (ax_alt, ax_az):
            ax.axvline(h, color=color, linewidth=1, alpha=0.6)
        print(f"{label:8s}: {t.astimezone(zone).isoformat(timespec='seconds')}")

    ax_alt.legend()
    fig.suptitle(f"Sun path {args.date} at lat={args.lat:.4f} lon={args.lon:.4f}")
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

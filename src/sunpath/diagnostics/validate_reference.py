#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sunpath.astro.horizon import compute_sun_position
from sunpath.core.angles import wrap180
from sunpath.ephemeris import require_ephemeris
from sunpath.ephemeris.skyfield_sun import SkyfieldSun


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sunpath[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the low-order solar model against skyfield/DE421.")
    p.add_argument("--lat", type=float, default=51.4779)
    p.add_argument("--lon", type=float, default=-0.0015)
    p.add_argument("--year", type=int, default=2024)
    p.add_argument("--step-hours", type=float, default=7.0, help="sampling step (hours); odd values walk through the day")
    p.add_argument("--zenith-margin", type=float, default=5.0, help="skip azimuth residuals within this many degrees of the zenith")
    p.add_argument("--data-dir", default=".", help="where skyfield keeps de421.bsp")
    p.add_argument("--out-png", default=None, help="optional residual plot")
    args = p.parse_args(argv)

    require_ephemeris()
    print("Loading DE421 ephemeris...")
    ref = SkyfieldSun.load(args.data_dir)

    t = datetime(args.year, 1, 1, tzinfo=timezone.utc)
    t_end = datetime(args.year + 1, 1, 1, tzinfo=timezone.utc)
    step = timedelta(hours=args.step_hours)

    days: List[float] = []
    err_alt: List[float] = []
    err_az: List[float] = []
    while t < t_end:
        mine = compute_sun_position(t, args.lat, args.lon)
        truth = ref.position(t, args.lat, args.lon)
        d_alt = (mine.altitude_deg - truth.altitude_deg) * 60.0
        # azimuth is ill-conditioned near the zenith
        if abs(truth.altitude_deg) < 90.0 - args.zenith_margin:
            d_az = wrap180(mine.azimuth_deg - truth.azimuth_deg) * 60.0 * math.cos(math.radians(truth.altitude_deg))
        else:
            d_az = float("nan")
        days.append((t - datetime(args.year, 1, 1, tzinfo=timezone.utc)).total_seconds() / 86400.0)
        err_alt.append(d_alt)
        err_az.append(d_az)
        t += step

    def _stats(xs: List[float]) -> str:
        xs = [x for x in xs if not math.isnan(x)]
        rms = math.sqrt(sum(x * x for x in xs) / len(xs))
        return f"max |err| = {max(abs(x) for x in xs):7.3f} arcmin   rms = {rms:7.3f} arcmin"

    print(f"Validated {len(days)} points in {args.year} at lat={args.lat} lon={args.lon}")
    print(f"  altitude        : {_stats(err_alt)}")
    print(f"  azimuth*cos(alt): {_stats(err_az)}")

    if args.out_png:
        plt = _need_matplotlib()
        fig, axs = plt.subplots(2, 1, figsize=(12, 7), sharex=True)
        axs[0].scatter(days, err_alt, s=2, alpha=0.6, color="orange")
        axs[0].set_title("Altitude error (model - DE421)")
        axs[0].set_ylabel("Error (arcmin)")
        axs[0].grid(True, alpha=0.3)
        axs[1].scatter(days, err_az, s=2, alpha=0.6, color="blue")
        axs[1].set_title("Azimuth error x cos(alt) (model - DE421)")
        axs[1].set_ylabel("Error (arcmin)")
        axs[1].set_xlabel("Day of year")
        axs[1].grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

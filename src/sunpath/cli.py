from __future__ import annotations

import argparse
from datetime import datetime, timezone
import importlib
import inspect
import logging
import math
import sys

from .core.time import local_date, tz_from_arg, utc_offset_hours


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _observer_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("--when", default=None, help="ISO-8601 instant; naive values are local to --tz (default: now)")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--tz", default="UTC", help="IANA zone name (Europe/London) or UTC offset in hours (-5)")
    return p


def _when(args: argparse.Namespace) -> datetime:
    from .core.time import parse_when

    if args.when is None:
        return datetime.now(timezone.utc)
    return parse_when(args.when, tz_from_arg(args.tz))


def cmd_position(argv: list[str]) -> int:
    from .astro.horizon import compute_sun_position
    from .display import compass_direction

    p = _observer_parser("sunpath position", "Sun azimuth/altitude for an observer.")
    args = p.parse_args(argv)

    when = _when(args)
    pos = compute_sun_position(when, args.lat, args.lon)
    az, alt = pos.rounded()

    print(f"Instant (UTC): {when.astimezone(timezone.utc).isoformat(timespec='seconds')}")
    print(f"  Azimuth  = {pos.azimuth_deg:.4f} deg  ({az:03d}° {compass_direction(pos.azimuth_deg)})")
    print(f"  Altitude = {pos.altitude_deg:.4f} deg  ({alt}°)")
    return 0


def cmd_events(argv: list[str]) -> int:
    from .display import format_azimuth, format_duration, format_event_time
    from .engines.events import compute_sun_rise_set, day_length

    p = _observer_parser("sunpath events", "Sunrise/sunset (-0.833 deg altitude) for the local day.")
    p.add_argument("--threshold", type=float, default=None, help="Override the rise/set altitude (deg)")
    args = p.parse_args(argv)

    tz = tz_from_arg(args.tz)
    when = _when(args)
    kwargs = {} if args.threshold is None else {"threshold_deg": args.threshold}
    ev = compute_sun_rise_set(when, args.lat, args.lon, tz, **kwargs)

    print(f"Day    : {local_date(when, tz).isoformat()} ({args.tz})")
    print(f"Sunrise: {format_event_time(ev.rise, tz)}   Azimuth: {format_azimuth(ev.rise_azimuth_deg if ev.rise is not None else None)}")
    print(f"Sunset : {format_event_time(ev.set, tz)}   Azimuth: {format_azimuth(ev.set_azimuth_deg if ev.set is not None else None)}")
    print(f"Duration of Day: {format_duration(day_length(ev))}")
    return 0


def cmd_transit(argv: list[str]) -> int:
    from .display import format_event_time
    from .engines.events import compute_solar_transit

    p = _observer_parser("sunpath transit", "Solar transit (solar noon) for the local day.")
    args = p.parse_args(argv)

    tz = tz_from_arg(args.tz)
    t = compute_solar_transit(_when(args), args.lat, args.lon, tz)
    print(f"Solar Noon: {format_event_time(t, tz, '%H:%M:%S')}")
    return 0


def cmd_report(argv: list[str]) -> int:
    from .api import sun_report
    from .display import format_azimuth, format_dms, format_duration, format_event_time

    p = _observer_parser("sunpath report", "Everything a watch face shows, in one go.")
    args = p.parse_args(argv)

    tz = tz_from_arg(args.tz)
    r = sun_report(_when(args), args.lat, args.lon, tz)
    ev = r.events

    print(f"Location : {format_dms(r.coordinate.latitude_deg, r.coordinate.longitude_deg)}")
    print(f"Updated  : {format_event_time(r.when, tz, '%d/%m/%y %H:%M')} (UTC{utc_offset_hours(r.when, tz):+g})")
    print()
    print(f"Azimuth  : {format_azimuth(r.azimuth_deg)}")
    print(f"Altitude : {r.altitude_deg}°{'' if r.sun_up else ' (below horizon)'}")
    print(f"Shadow   : {format_azimuth(r.shadow_azimuth_deg)}")
    print()
    print(f"Sunrise  : {format_event_time(ev.rise, tz)}  {format_azimuth(ev.rise_azimuth_deg if ev.rise is not None else None)}")
    print(f"Sunset   : {format_event_time(ev.set, tz)}  {format_azimuth(ev.set_azimuth_deg if ev.set is not None else None)}")
    print(f"Solar Noon: {format_event_time(r.transit, tz)}")
    print(f"Day      : {format_duration(r.day_length)}")
    return 0


def cmd_jd(argv: list[str]) -> int:
    from .astro.solar import equation_of_time_minutes, sun_equatorial
    from .core.time import days_since_j2000, gmst_deg, julian_day

    p = argparse.ArgumentParser(prog="sunpath jd", description="Print time base and equatorial Sun for an instant.")
    p.add_argument("--when", default=None, help="ISO-8601 instant (default: now, UTC)")
    p.add_argument("--tz", default="UTC", help="Zone for naive --when values")
    args = p.parse_args(argv)

    when = _when(args)
    jd = julian_day(when)
    eq = sun_equatorial(days_since_j2000(when))

    print(f"JD              = {jd:.6f}")
    print(f"d (J2000.0)     = {days_since_j2000(when):.6f}")
    print(f"GMST            = {gmst_deg(jd):.6f} deg")
    print(f"Sun RA          = {math.degrees(eq.ra_rad):.6f} deg")
    print(f"Sun Dec         = {math.degrees(eq.dec_rad):.6f} deg")
    print(f"Eq. of time     = {equation_of_time_minutes(when):.3f} min")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="sunpath", description="Sun position, sunrise/sunset and solar noon.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("position", help="Sun azimuth/altitude now or at --when")
    sub.add_parser("events", help="Sunrise/sunset and their azimuths")
    sub.add_parser("transit", help="Solar noon")
    sub.add_parser("report", help="Position, events, shadow and day length")
    sub.add_parser("jd", help="Julian Day, sidereal time and solar RA/Dec")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (optional extras)")
    p_diag.add_argument(
        "tool",
        choices=["sun-path", "validate-ref"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "position":
        return cmd_position(rest)

    if args.cmd == "events":
        return cmd_events(rest)

    if args.cmd == "transit":
        return cmd_transit(rest)

    if args.cmd == "report":
        return cmd_report(rest)

    if args.cmd == "jd":
        return cmd_jd(rest)

    if args.cmd == "diag":
        tool_map = {
            "sun-path": "sunpath.diagnostics.sun_path",
            "validate-ref": "sunpath.diagnostics.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())

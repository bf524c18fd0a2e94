import time
from datetime import datetime, timezone

def record_event(event_name, t0=None, **details):

    mono = time.perf_counter()
    wall = datetime.now(timezone.utc)

    record = {
        "event": event_name,
        "mono_time": mono,
        "wall_time": wall.isoformat(),
    }

    if t0 is not None:
        record["delta_s"] = mono - t0

    record.update(details)
    return record

def contact_event(contact, frame, t0=None):
    return record_event(
        f"{contact.kind}_contact",
        t0,
        frame=frame,
        index=contact.index,
        depth=round(contact.depth, 4),
        normal=(round(float(contact.normal[0]), 4), round(float(contact.normal[1]), 4)),
        resolved=contact.resolved,
    )

def format_event(e, startTime):
    line = f"{e['event']} : {e['mono_time'] - startTime:.4f}"
    extras = [f"{k}={v}" for k, v in e.items()
              if k not in ("event", "mono_time", "wall_time", "delta_s")]
    if extras:
        line += "  " + " ".join(extras)
    return line

def log_events(eventList, startTime):
    for e in sorted(eventList, key=lambda e: e['mono_time']):
        print(format_event(e, startTime))

from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute, jdn

def weekday(info, engine) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun, same as date.weekday()
    return {"weekday": int(jdn(info) % 7)}

def day_of_year(info, engine) -> Dict[str, Any]:
    k = info.kurdish
    return {"day_of_year": engine.day_of_year(k.year, k.month, k.day)}

def leap_year(info, engine) -> Dict[str, Any]:
    y = info.kurdish.year
    return {"is_leap_year": engine.is_leap_year(y), "days_in_year": engine.days_in_year(y)}

def nowruz(info, engine) -> Dict[str, Any]:
    return {"nowruz": engine.year_start(info.kurdish.year)}

register_attribute("weekday", weekday)
register_attribute("day_of_year", day_of_year)
register_attribute("leap_year", leap_year)
register_attribute("nowruz", nowruz)

"""Fetch curb regulations and the suspension calendar, and validate their shape."""
from __future__ import annotations

import json
import logging
import os
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

import requests

from . import config
from .rules import RegulationFeature
from .suspensions import CalendarDay, CalendarItem

logger = logging.getLogger(__name__)


class ParkingDataClient:
    """Fetches raw payloads from OpenCurb and the NYC calendar API."""

    def __init__(
        self,
        *,
        subscription_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        snapshot_path: Optional[str] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.subscription_key = subscription_key or os.environ.get(config.SUBSCRIPTION_KEY_ENV)
        self.snapshot_path = snapshot_path

    def _build_calendar_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Cache-Control": "no-cache"}
        if self.subscription_key:
            headers["Ocp-Apim-Subscription-Key"] = self.subscription_key
        else:
            logger.warning("No NYC API subscription key set (%s)", config.SUBSCRIPTION_KEY_ENV)
        return headers

    def _get_json(self, url: str, *, params: Dict[str, str], headers: Optional[Dict[str, str]] = None) -> dict:
        response = self.session.get(url, params=params, headers=headers, timeout=config.HTTP_TIMEOUT)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected payload from {url}")
        self._write_snapshot(url, data)
        return data

    def _write_snapshot(self, url: str, data: dict) -> None:
        if not self.snapshot_path:
            return
        with open(self.snapshot_path, "a", encoding="utf-8") as handle:
            handle.write(json.dumps({"url": url, "payload": data}))
            handle.write("\n")

    def fetch_regulations(
        self,
        lat: float,
        lon: float,
        *,
        on_date: Optional[date] = None,
        radius: int = config.DEFAULT_RADIUS_METERS,
    ) -> dict:
        on_date = on_date or date.today()
        day = on_date.strftime("%Y-%m-%d")
        params: Dict[str, str] = {
            "coord": f"{lat},{lon}",
            "v_type": config.VEHICLE_TYPE,
            "a_type": config.ACTION_TYPE,
            "meter": "0",
            "radius": str(radius),
            "StartDate": day,
            "StartTime": "00:00",
            "EndDate": day,
            "EndTime": "23:59",
            "action_allowed": "1",
        }
        data = self._get_json(config.OPEN_CURB_URL, params=params)
        logger.info("Fetched %s curb regulations near %s,%s", len(data.get("features") or []), lat, lon)
        return data

    def fetch_calendar(self, from_date: Optional[date] = None, to_date: Optional[date] = None) -> dict:
        from_date = from_date or date.today()
        to_date = to_date or from_date + timedelta(days=config.CALENDAR_LOOKAHEAD_DAYS)
        params = {
            "fromdate": from_date.strftime("%m-%d-%Y"),
            "todate": to_date.strftime("%m-%d-%Y"),
        }
        data = self._get_json(config.NYC_CALENDAR_URL, params=params, headers=self._build_calendar_headers())
        logger.info("Fetched %s calendar days", len(data.get("days") or []))
        return data


def parse_features(payload: dict) -> List[RegulationFeature]:
    """Turn an OpenCurb geojson payload into regulation features.

    Features without a ``rule_simplified`` string are skipped.
    """
    features = payload.get("features") if isinstance(payload, dict) else None
    if not isinstance(features, list):
        raise ValueError("Unexpected payload: missing 'features' list")

    parsed: List[RegulationFeature] = []
    for feature in features:
        properties = feature.get("properties") if isinstance(feature, dict) else None
        rule = properties.get("rule_simplified") if isinstance(properties, dict) else None
        if not isinstance(rule, str):
            logger.warning("Skipping feature without rule text: %s", feature)
            continue
        parsed.append(RegulationFeature(rule_text=rule))
    return parsed


def _parse_calendar_item(item: dict) -> Optional[CalendarItem]:
    if not isinstance(item, dict):
        return None
    item_type = item.get("type")
    status = item.get("status")
    if not isinstance(item_type, str) or not isinstance(status, str):
        return None
    details = item.get("details")
    exception_name = item.get("exceptionName")
    return CalendarItem(
        type=item_type,
        status=status,
        details=details if isinstance(details, str) else None,
        exception_name=exception_name if isinstance(exception_name, str) else None,
    )


def parse_calendar(payload: dict) -> List[CalendarDay]:
    """Turn a NYC calendar payload into calendar days, keeping calendar order."""
    days = payload.get("days") if isinstance(payload, dict) else None
    if not isinstance(days, list):
        raise ValueError("Unexpected payload: missing 'days' list")

    parsed: List[CalendarDay] = []
    for day in days:
        if not isinstance(day, dict):
            logger.warning("Skipping calendar entry: %s", day)
            continue
        try:
            day_date = datetime.strptime(str(day.get("today_id")), "%Y%m%d").date()
        except ValueError:
            logger.warning("Skipping calendar day with bad date id: %s", day.get("today_id"))
            continue

        items: List[CalendarItem] = []
        for raw_item in day.get("items") or []:
            item = _parse_calendar_item(raw_item)
            if item is None:
                logger.warning("Skipping calendar item on %s: %s", day_date, raw_item)
                continue
            items.append(item)
        parsed.append(CalendarDay(date=day_date, items=items))
    return parsed


__all__ = ["ParkingDataClient", "parse_features", "parse_calendar"]

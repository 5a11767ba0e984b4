"""Fetch, resolve, reverse and submit: one correction run end to end."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Type, TypeVar
import logging

from rail_direction.core.config import CorrectionConfig, get_config
from rail_direction.core.errors import ArgumentError
from rail_direction.correction.resolver import should_reverse
from rail_direction.correction.reverser import reverse_path
from rail_direction.data.features import EditResult, LineFeature, StationFeature
from rail_direction.data.stations import StationIndex


logger = logging.getLogger(__name__)

T = TypeVar("T")


class FeatureService(Protocol):
    def query_features(
        self, layer_url: str, token: str, model: Type[T], where: str = "1=1", out_fields: str = "*"
    ) -> List[T]:
        ...

    def update_features(self, layer_url: str, token: str, features: Sequence[LineFeature]) -> List[EditResult]:
        ...


class Stage(str, Enum):
    FETCHING_STATIONS = "fetching_stations"
    FETCHING_LINES = "fetching_lines"
    INDEXING = "indexing"
    RESOLVING = "resolving"
    UPDATING = "updating"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(slots=True)
class UpdateTally:
    success: int = 0
    failed: int = 0
    rejected: List[EditResult] = field(default_factory=list)

    @classmethod
    def from_results(cls, results: Sequence[EditResult]) -> "UpdateTally":
        rejected = [result for result in results if not result.success]
        return cls(success=len(results) - len(rejected), failed=len(rejected), rejected=rejected)


@dataclass(slots=True)
class CorrectionReport:
    stage: Stage = Stage.FETCHING_STATIONS
    stations_fetched: int = 0
    lines_fetched: int = 0
    corrected: List[LineFeature] = field(default_factory=list)
    tally: Optional[UpdateTally] = None


def run_correction(
    token: Optional[str],
    service: FeatureService,
    config: Optional[CorrectionConfig] = None,
    report: Optional[CorrectionReport] = None,
) -> CorrectionReport:
    """Correct the direction of every line segment of the lines layer.

    Pass a report to inspect how far an aborted run got. Fatal errors
    (argument, station lookup, service) propagate; the update batch is only
    submitted once every segment has been resolved.
    """
    report = report if report is not None else CorrectionReport()
    try:
        if not token:
            raise ArgumentError("Invalid arguments")
        cfg = (config or get_config()).service
        _run(token, service, cfg.stations_url, cfg.lines_url, cfg.where, cfg.out_fields, report)
    except Exception:
        report.stage = Stage.ABORTED
        raise
    return report


def _run(
    token: str,
    service: FeatureService,
    stations_url: str,
    lines_url: str,
    where: str,
    out_fields: str,
    report: CorrectionReport,
) -> None:
    report.stage = Stage.FETCHING_STATIONS
    logger.info("Getting stations...")
    stations = service.query_features(stations_url, token, StationFeature, where=where, out_fields=out_fields)
    report.stations_fetched = len(stations)
    logger.info(f"{len(stations)} feature(s) fetched.")

    report.stage = Stage.FETCHING_LINES
    logger.info("Getting lines...")
    lines = service.query_features(lines_url, token, LineFeature, where=where, out_fields=out_fields)
    report.lines_fetched = len(lines)
    logger.info(f"{len(lines)} feature(s) fetched.")

    report.stage = Stage.INDEXING
    logger.info("Getting station dictionary...")
    index = StationIndex.build(stations)

    report.stage = Stage.RESOLVING
    logger.info("Reversing...")
    corrected: List[LineFeature] = []
    for line in lines:
        if should_reverse(line, index):
            logger.info(f"{line.code1} <-> {line.code2} should reverse")
            corrected.append(reverse_path(line))
        else:
            logger.info(f"{line.code1} <-> {line.code2} is correct")
    report.corrected = corrected

    report.stage = Stage.UPDATING
    logger.info(f"Updating {len(corrected)} feature(s)...")
    if corrected:
        results = service.update_features(lines_url, token, corrected)
        tally = UpdateTally.from_results(results)
        for result in tally.rejected:
            error = result.error
            detail = f"{error.code} {error.description}" if error else "no detail"
            logger.warning(f"Update rejected for objectId {result.objectId}: {detail}")
        logger.info(f"{tally.success} success, {tally.failed} failed")
        report.tally = tally

    report.stage = Stage.DONE
    logger.info("End")

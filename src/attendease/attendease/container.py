from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.movement import AlertCooldown, MovementMonitor
from .attendance.mysql_session_repository import MySQLSessionRepository
from .attendance.mysql_summary_repository import MySQLDailySummaryRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .geofence.mysql_geofence_repository import MySQLGeoFenceRepository
from .geofence.service import GeoFenceService
from .regularization.mysql_regularization_repository import MySQLRegularizationRepository
from .regularization.service import RegularizationService
from .reports.mysql_employee_directory import MySQLEmployeeDirectory
from .reports.service import DailyReportService
from .settings.mysql_app_config_repository import MySQLAppConfigRepository
from .settings.service import SettingsService
from .sync.service import SyncService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    sessions_repo: MySQLSessionRepository
    summaries_repo: MySQLDailySummaryRepository
    geofences_repo: MySQLGeoFenceRepository
    app_config_repo: MySQLAppConfigRepository
    employees_repo: MySQLEmployeeDirectory
    regularizations_repo: MySQLRegularizationRepository

    settings_service: SettingsService
    attendance_service: AttendanceService
    geofence_service: GeoFenceService
    sync_service: SyncService
    movement_monitor: MovementMonitor
    report_service: DailyReportService
    regularization_service: RegularizationService


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    sessions_repo = MySQLSessionRepository(conn)
    summaries_repo = MySQLDailySummaryRepository(conn)
    geofences_repo = MySQLGeoFenceRepository(conn)
    app_config_repo = MySQLAppConfigRepository(conn)
    employees_repo = MySQLEmployeeDirectory(conn)
    regularizations_repo = MySQLRegularizationRepository(conn)

    settings_service = SettingsService(app_config_repo, settings=settings)
    policy_provider = settings_service.current_policy

    attendance_service = AttendanceService(
        sessions_repo,
        summaries_repo,
        geofences_repo,
        policy_provider=policy_provider,
    )
    geofence_service = GeoFenceService(geofences_repo, policy_provider=policy_provider)
    sync_service = SyncService(sessions_repo, attendance_service)
    movement_monitor = MovementMonitor(sessions_repo, cooldown=AlertCooldown(), policy_provider=policy_provider)
    report_service = DailyReportService(employees_repo, summaries_repo)
    regularization_service = RegularizationService(regularizations_repo, sessions_repo, attendance_service)

    return Container(
        conn=conn,
        sessions_repo=sessions_repo,
        summaries_repo=summaries_repo,
        geofences_repo=geofences_repo,
        app_config_repo=app_config_repo,
        employees_repo=employees_repo,
        regularizations_repo=regularizations_repo,
        settings_service=settings_service,
        attendance_service=attendance_service,
        geofence_service=geofence_service,
        sync_service=sync_service,
        movement_monitor=movement_monitor,
        report_service=report_service,
        regularization_service=regularization_service,
    )

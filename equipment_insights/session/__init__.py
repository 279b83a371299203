from .monitoring_session import MonitoringSession, SessionSnapshot

__all__ = ["MonitoringSession", "SessionSnapshot"]

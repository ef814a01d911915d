from alert_relay.schemas.alert import EndpointList, ErrorResponse, HealthStatus, SendResult, ServiceStatus

__all__ = ["EndpointList", "ErrorResponse", "HealthStatus", "SendResult", "ServiceStatus"]

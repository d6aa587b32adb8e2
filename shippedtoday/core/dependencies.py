"""
Shared dependencies

Dependencies injected into the controllers.
"""

from fastapi import Depends, Request

from ..services.launch_service import LaunchService, launch_service


def get_launch_service() -> LaunchService:
    """The launch service dependency"""
    return launch_service


def resolve_client_id(request: Request, trust_forwarded_for: bool) -> str:
    """
    Identify the client behind a request

    With ``trust_forwarded_for`` the rightmost X-Forwarded-For entry is used:
    it is the one appended by the trusted proxy, while entries to its left
    are supplied by the client.
    """
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        hops = [hop.strip() for hop in forwarded.split(",") if hop.strip()]
        if hops:
            return hops[-1]

    if request.client and request.client.host:
        return request.client.host

    return "unknown"


def get_client_id(
    request: Request, service: LaunchService = Depends(get_launch_service)
) -> str:
    """Client id used for rate limiting, kept on request.state for the request log"""
    client_id = resolve_client_id(
        request, service.settings.security.trust_forwarded_for)
    request.state.client_id = client_id
    return client_id

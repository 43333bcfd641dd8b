"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from campus_events.conf import catalog_timezone, highlight_limit
from campus_events.domain import RegistrantProfile, UserRole
from campus_events.domain.errors import DomainError, ErrorCode
from campus_events.handlers.serializers import (
    CatalogQuerySerializer,
    CatalogStatsSerializer,
    EventViewSerializer,
    RegistrationRequestSerializer,
    RegistrationSerializer,
)
from campus_events.services.bookmark_service import BookmarkService
from campus_events.services.catalog_service import CatalogService
from campus_events.services.registration_service import RegistrationService
from campus_events.stores.django_store import (
    DjangoBookmarkStore,
    DjangoEventStore,
    DjangoRegistrationStore,
)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_USER_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_REGISTERED: status.HTTP_404_NOT_FOUND,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


def catalog_service() -> CatalogService:
    return CatalogService(
        DjangoEventStore(),
        DjangoRegistrationStore(),
        DjangoBookmarkStore(),
        tz=catalog_timezone(),
    )


def registration_service() -> RegistrationService:
    return RegistrationService(DjangoEventStore(), DjangoRegistrationStore())


def bookmark_service() -> BookmarkService:
    return BookmarkService(DjangoEventStore(), DjangoBookmarkStore())


class DomainAPIView(APIView):
    """APIView that maps raised domain errors to HTTP responses."""

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)


class EventPagination(PageNumberPagination):
    page_size_query_param = "page_size"
    max_page_size = 100


class EventListView(DomainAPIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        params = CatalogQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        views = catalog_service().list_events(
            params.to_query(), params.validated_data.get("user_id") or None
        )
        paginator = EventPagination()
        page = paginator.paginate_queryset(views, request, view=self)
        return paginator.get_paginated_response(EventViewSerializer(page, many=True).data)


class EventHighlightsView(DomainAPIView):
    """Handler for GET /api/events/highlights"""

    def get(self, request: Request) -> Response:
        views = catalog_service().highlights(highlight_limit())
        return Response(EventViewSerializer(views, many=True).data)


class EventStatsView(DomainAPIView):
    """Handler for GET /api/events/stats"""

    def get(self, request: Request) -> Response:
        return Response(CatalogStatsSerializer(catalog_service().stats()).data)


class EventDetailView(DomainAPIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        view = catalog_service().get_event(event_id, request.query_params.get("user_id") or None)
        return Response(EventViewSerializer(view).data)


class RegistrationListView(DomainAPIView):
    """Handler for GET/POST /api/events/{event_id}/registrations"""

    def get(self, request: Request, event_id: str) -> Response:
        registrations = registration_service().registrations_for(event_id)
        return Response(RegistrationSerializer(registrations, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        payload = RegistrationRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        profile = RegistrantProfile(
            name=data["name"],
            email=data["email"],
            role=UserRole(data["role"]),
            department=data.get("department") or None,
        )

        service = registration_service()
        existed = service.is_registered(event_id, data["user_id"])
        result = service.register(event_id, data["user_id"], profile)
        return Response(
            RegistrationSerializer(result.value).data,
            status=status.HTTP_200_OK if existed else status.HTTP_201_CREATED,
        )


class RegistrationDetailView(DomainAPIView):
    """Handler for DELETE /api/events/{event_id}/registrations/{user_id}"""

    def delete(self, request: Request, event_id: str, user_id: str) -> Response:
        registration_service().unregister(event_id, user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CheckInView(DomainAPIView):
    """Handler for POST/DELETE /api/events/{event_id}/registrations/{user_id}/check-in"""

    def post(self, request: Request, event_id: str, user_id: str) -> Response:
        result = registration_service().check_in(event_id, user_id)
        if not result.ok:
            return error_response(result.error)
        return Response(RegistrationSerializer(result.value).data)

    def delete(self, request: Request, event_id: str, user_id: str) -> Response:
        result = registration_service().check_out(event_id, user_id)
        if not result.ok:
            return error_response(result.error)
        return Response(RegistrationSerializer(result.value).data)


class TicketCheckInView(DomainAPIView):
    """Handler for POST /api/tickets/{ticket}/check-in"""

    def post(self, request: Request, ticket: str) -> Response:
        result = registration_service().check_in_by_ticket(ticket)
        if not result.ok:
            return error_response(result.error)
        return Response(RegistrationSerializer(result.value).data)


class UserRegistrationListView(DomainAPIView):
    """Handler for GET /api/users/{user_id}/registrations"""

    def get(self, request: Request, user_id: str) -> Response:
        registrations = registration_service().registrations_of(user_id)
        return Response(RegistrationSerializer(registrations, many=True).data)


class BookmarkListView(DomainAPIView):
    """Handler for GET /api/users/{user_id}/bookmarks"""

    def get(self, request: Request, user_id: str) -> Response:
        event_ids = bookmark_service().bookmarks_for(user_id)
        return Response({"event_ids": [event_id.value for event_id in event_ids]})


class BookmarkDetailView(DomainAPIView):
    """Handler for PUT/DELETE /api/users/{user_id}/bookmarks/{event_id}"""

    def put(self, request: Request, user_id: str, event_id: str) -> Response:
        added = bookmark_service().bookmark(user_id, event_id)
        return Response(status=status.HTTP_201_CREATED if added else status.HTTP_200_OK)

    def delete(self, request: Request, user_id: str, event_id: str) -> Response:
        bookmark_service().unbookmark(user_id, event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

"""TMDb API wrapper.

One coroutine per TMDb capability. Each builds the request url from the
endpoint configuration, dispatches it through a TransportPort and turns
the raw outcome into a TmdbResult. Failures while sending or decoding a
call are captured in the result; caller misuse (PreconditionError, e.g. an
enum value with no configured wire mapping) propagates.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import TypeVar

from pydantic import ValidationError

from cinevault.config.endpoints import EndpointConfiguration
from cinevault.services import request_builder
from cinevault.services.result import TmdbResult
from cinevault.services.transport import ApiCallResult, TransportPort
from cinevault.shared.constants import HttpMethod
from cinevault.shared.errors import (
    CineVaultError,
    ErrorCode,
    ErrorContext,
    PreconditionError,
    TransportError,
    create_deserialization_error,
)
from cinevault.shared.logging import (
    log_api_call,
    log_operation_error,
    log_operation_success,
)
from cinevault.shared.models import (
    CollectionMethod,
    CompanyMethod,
    DiscoveryFilter,
    DiscoverySortBy,
    MovieMethod,
    PersonMethod,
    SearchType,
    SortBy,
    SortOrder,
    TmdbAccount,
    TmdbAlternativeTitles,
    TmdbAuthenticationToken,
    TmdbChangedEntriesList,
    TmdbChanges,
    TmdbCollectionImages,
    TmdbCompanyInformation,
    TmdbCompanyPreviewList,
    TmdbConfiguration,
    TmdbCreateMovieListRequest,
    TmdbCreateMovieListResponse,
    TmdbDepartments,
    TmdbFavoriteRequest,
    TmdbGenreList,
    TmdbGuestSession,
    TmdbImages,
    TmdbKeyword,
    TmdbKeywords,
    TmdbListItemRequest,
    TmdbModel,
    TmdbMovie,
    TmdbMovieAccountStates,
    TmdbMovieCollection,
    TmdbMovieCollectionPreviewList,
    TmdbMovieKeywords,
    TmdbMovieList,
    TmdbMovieListPreviewList,
    TmdbMovieLists,
    TmdbMovieListStatus,
    TmdbMoviePreviewList,
    TmdbMovieRatingRequest,
    TmdbMovieReviews,
    TmdbPersonCredits,
    TmdbPersonImages,
    TmdbPersonInformation,
    TmdbPersonPreviewList,
    TmdbReleases,
    TmdbReview,
    TmdbSession,
    TmdbStaff,
    TmdbStatusResponse,
    TmdbTrailers,
    TmdbTranslations,
    TmdbWatchListRequest,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=TmdbModel)


class QueryParameters(dict):
    """Ordered query parameters that skip absent values."""

    def add(self, name: str, value: object) -> QueryParameters:
        if value is None or value == "":
            return self
        self[name] = request_builder.format_value(value)
        return self


class TmdbApiWrapper:
    """Typed access to every TMDb v3 method used by CineVault.

    Args:
        transport: Transport performing the HTTP exchanges
        config: Endpoint configuration; shared, not copied
    """

    def __init__(
        self,
        transport: TransportPort,
        config: EndpointConfiguration,
    ) -> None:
        self.transport = transport
        self.config = config

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    @property
    def _methods(self):
        return self.config.methods

    @property
    def _params(self):
        return self.config.parameters

    def _url(
        self,
        template: str,
        *path_args: object,
        params: QueryParameters | None = None,
    ) -> str:
        return request_builder.build_url(
            self.config.base_url,
            template,
            path_args,
            self.config.api_key_parameter_name,
            self.config.api_key,
            params,
        )

    def _date(self, value: date | None) -> str | None:
        if value is None:
            return None
        return request_builder.format_date(value, self.config.json_date_pattern)

    def _paged(self, page: int | None, language: str | None) -> QueryParameters:
        return (
            QueryParameters()
            .add(self._params.page, page)
            .add(self._params.language, language)
        )

    def _date_range(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> QueryParameters:
        return (
            QueryParameters()
            .add(self._params.start_date, self._date(start_date))
            .add(self._params.end_date, self._date(end_date))
        )

    async def _perform_api_call(
        self,
        model: type[M],
        build_url,
        body: TmdbModel | None = None,
        method: str | None = None,
        operation: str = "api_call",
    ) -> TmdbResult[M]:
        """Dispatch one call and decode its outcome.

        Args:
            model: Model the success body is validated into
            build_url: Zero-argument callable returning the request url
            body: Request body; body-carrying calls default to POST
            method: Explicit HTTP method
            operation: Operation name for logging
        """
        try:
            url = build_url()
            http_method = method or (HttpMethod.POST if body is not None else HttpMethod.GET)
            start = time.perf_counter()
            call = await self.transport.perform_request(
                url,
                http_method,
                body.to_json() if body is not None else None,
                self.config.cache_level,
                self.config.timeout,
                self.config.use_secure_connection,
            )
            duration_ms = (time.perf_counter() - start) * 1000
            self._log_call(call, http_method, duration_ms, operation)

            if call.error is not None:
                return TmdbResult(
                    error=call.error,
                    api_error_response=self._parse_status(call.json),
                )
            if not call.json:
                return TmdbResult()

            try:
                result = model.model_validate_json(call.json)
            except ValidationError as e:
                raise create_deserialization_error(
                    f"Invalid {model.__name__} payload: {e.error_count()} error(s)",
                    model_name=model.__name__,
                    validation_errors=e.errors(include_url=False),
                    operation=operation,
                    original_error=e,
                ) from e
            result.etag = call.etag
            log_operation_success(
                logger=logger,
                operation=operation,
                duration_ms=duration_ms,
                result_info={"model": model.__name__},
            )
            return TmdbResult(result=result)

        except PreconditionError:
            raise
        except Exception as e:
            error = e
            if not isinstance(e, CineVaultError):
                error = CineVaultError(
                    ErrorCode.TMDB_API_REQUEST_FAILED,
                    f"Unexpected error during {operation}: {e!s}",
                    ErrorContext(operation=operation),
                    e,
                )
            log_operation_error(logger=logger, error=error, operation=operation)
            return TmdbResult(error=e)

    @staticmethod
    def _parse_status(json_body: str) -> TmdbStatusResponse | None:
        if not json_body:
            return None
        try:
            status = TmdbStatusResponse.model_validate_json(json_body)
        except ValidationError:
            status = None
        if status is None or "status_code" not in status.model_fields_set:
            logger.debug("Error body is not a TMDb status payload")
            return None
        return status

    @staticmethod
    def _log_call(
        call: ApiCallResult,
        method: str,
        duration_ms: float,
        operation: str,
    ) -> None:
        status_code = None
        if isinstance(call.error, TransportError):
            status_code = call.error.status_code
        log_api_call(
            logger,
            call.source_url,
            method,
            status_code=status_code,
            duration_ms=round(duration_ms, 2),
            context={"tmdb_operation": operation, "failed": call.error is not None},
        )

    # ------------------------------------------------------------------
    # Configuration and authentication
    # ------------------------------------------------------------------

    async def get_configuration(self) -> TmdbResult[TmdbConfiguration]:
        return await self._perform_api_call(
            TmdbConfiguration,
            lambda: self._url(self._methods.configuration),
            operation="get_configuration",
        )

    async def get_authentication_token(self) -> TmdbResult[TmdbAuthenticationToken]:
        return await self._perform_api_call(
            TmdbAuthenticationToken,
            lambda: self._url(self._methods.new_authentication_token),
            operation="get_authentication_token",
        )

    async def get_session(self, authentication_token: str) -> TmdbResult[TmdbSession]:
        params = QueryParameters().add(
            self._params.authentication_token, authentication_token
        )
        return await self._perform_api_call(
            TmdbSession,
            lambda: self._url(self._methods.new_session, params=params),
            operation="get_session",
        )

    async def get_guest_session(self) -> TmdbResult[TmdbGuestSession]:
        return await self._perform_api_call(
            TmdbGuestSession,
            lambda: self._url(self._methods.new_guest_session),
            operation="get_guest_session",
        )

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    async def get_account(self, session_id: str) -> TmdbResult[TmdbAccount]:
        params = QueryParameters().add(self._params.session_id, session_id)
        return await self._perform_api_call(
            TmdbAccount,
            lambda: self._url(self._methods.account, params=params),
            operation="get_account",
        )

    async def get_account_lists(
        self,
        account_id: int,
        session_id: str,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMovieListPreviewList]:
        params = QueryParameters().add(self._params.session_id, session_id)
        params.update(self._paged(page, language))
        return await self._perform_api_call(
            TmdbMovieListPreviewList,
            lambda: self._url(self._methods.account_lists, account_id, params=params),
            operation="get_account_lists",
        )

    async def set_favorite(
        self,
        account_id: int,
        favorite_request: TmdbFavoriteRequest,
        session_id: str,
    ) -> TmdbResult[TmdbStatusResponse]:
        params = QueryParameters().add(self._params.session_id, session_id)
        return await self._perform_api_call(
            TmdbStatusResponse,
            lambda: self._url(
                self._methods.account_add_favorite, account_id, params=params
            ),
            body=favorite_request,
            operation="set_favorite",
        )

    async def set_watch_list(
        self,
        account_id: int,
        watch_list_request: TmdbWatchListRequest,
        session_id: str,
    ) -> TmdbResult[TmdbStatusResponse]:
        params = QueryParameters().add(self._params.session_id, session_id)
        return await self._perform_api_call(
            TmdbStatusResponse,
            lambda: self._url(
                self._methods.account_edit_watch_list, account_id, params=params
            ),
            body=watch_list_request,
            operation="set_watch_list",
        )

    async def _get_account_movie_list(
        self,
        template: str,
        operation: str,
        account_id: int,
        session_id: str,
        page: int | None,
        sort_by: SortBy,
        sort_order: SortOrder,
        language: str | None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        def build() -> str:
            params = QueryParameters().add(self._params.session_id, session_id)
            params.update(self._paged(page, language))
            if sort_by is not SortBy.NONE:
                params.add(
                    self._params.sort_by,
                    request_builder.sort_by_parameter(sort_by, self.config),
                )
            if sort_order is not SortOrder.UNSET:
                params.add(
                    self._params.sort_order,
                    request_builder.sort_order_parameter(sort_order, self.config),
                )
            return self._url(template, account_id, params=params)

        return await self._perform_api_call(
            TmdbMoviePreviewList, build, operation=operation
        )

    async def get_account_favorite_movies(
        self,
        account_id: int,
        session_id: str,
        page: int | None = None,
        sort_by: SortBy = SortBy.NONE,
        sort_order: SortOrder = SortOrder.UNSET,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        return await self._get_account_movie_list(
            self._methods.account_favorite_movies,
            "get_account_favorite_movies",
            account_id,
            session_id,
            page,
            sort_by,
            sort_order,
            language,
        )

    async def get_account_rated_movies(
        self,
        account_id: int,
        session_id: str,
        page: int | None = None,
        sort_by: SortBy = SortBy.NONE,
        sort_order: SortOrder = SortOrder.UNSET,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        return await self._get_account_movie_list(
            self._methods.account_rated_movies,
            "get_account_rated_movies",
            account_id,
            session_id,
            page,
            sort_by,
            sort_order,
            language,
        )

    async def get_account_watch_list(
        self,
        account_id: int,
        session_id: str,
        page: int | None = None,
        sort_by: SortBy = SortBy.NONE,
        sort_order: SortOrder = SortOrder.UNSET,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        return await self._get_account_movie_list(
            self._methods.account_watch_list,
            "get_account_watch_list",
            account_id,
            session_id,
            page,
            sort_by,
            sort_order,
            language,
        )

    # ------------------------------------------------------------------
    # Movies
    # ------------------------------------------------------------------

    async def get_movie(
        self,
        movie_id: int,
        append: MovieMethod | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMovie]:
        def build() -> str:
            params = QueryParameters().add(self._params.language, language)
            if append is not None:
                params.add(
                    self._params.append_to_response,
                    request_builder.movie_method_parameter(append, self.config),
                )
            return self._url(self._methods.get_movie, movie_id, params=params)

        return await self._perform_api_call(TmdbMovie, build, operation="get_movie")

    async def get_alternative_movie_titles(
        self,
        movie_id: int,
        country: str | None = None,
    ) -> TmdbResult[TmdbAlternativeTitles]:
        params = QueryParameters().add(self._params.country, country)
        return await self._perform_api_call(
            TmdbAlternativeTitles,
            lambda: self._url(
                self._methods.movie_alternative_titles, movie_id, params=params
            ),
            operation="get_alternative_movie_titles",
        )

    async def get_movie_cast(self, movie_id: int) -> TmdbResult[TmdbStaff]:
        return await self._perform_api_call(
            TmdbStaff,
            lambda: self._url(self._methods.movie_cast, movie_id),
            operation="get_movie_cast",
        )

    async def get_movie_images(
        self,
        movie_id: int,
        language: str | None = None,
    ) -> TmdbResult[TmdbImages]:
        params = QueryParameters().add(self._params.language, language)
        return await self._perform_api_call(
            TmdbImages,
            lambda: self._url(self._methods.movie_images, movie_id, params=params),
            operation="get_movie_images",
        )

    async def get_movie_keywords(self, movie_id: int) -> TmdbResult[TmdbMovieKeywords]:
        return await self._perform_api_call(
            TmdbMovieKeywords,
            lambda: self._url(self._methods.movie_keywords, movie_id),
            operation="get_movie_keywords",
        )

    async def get_movie_releases(self, movie_id: int) -> TmdbResult[TmdbReleases]:
        return await self._perform_api_call(
            TmdbReleases,
            lambda: self._url(self._methods.movie_releases, movie_id),
            operation="get_movie_releases",
        )

    async def get_movie_trailers(self, movie_id: int) -> TmdbResult[TmdbTrailers]:
        return await self._perform_api_call(
            TmdbTrailers,
            lambda: self._url(self._methods.movie_trailers, movie_id),
            operation="get_movie_trailers",
        )

    async def get_movie_translations(
        self,
        movie_id: int,
    ) -> TmdbResult[TmdbTranslations]:
        return await self._perform_api_call(
            TmdbTranslations,
            lambda: self._url(self._methods.movie_translations, movie_id),
            operation="get_movie_translations",
        )

    async def get_similar_movies(
        self,
        movie_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        params = self._paged(page, language)
        return await self._perform_api_call(
            TmdbMoviePreviewList,
            lambda: self._url(self._methods.similar_movies, movie_id, params=params),
            operation="get_similar_movies",
        )

    async def get_movie_reviews(
        self,
        movie_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMovieReviews]:
        params = self._paged(page, language)
        return await self._perform_api_call(
            TmdbMovieReviews,
            lambda: self._url(self._methods.movie_reviews, movie_id, params=params),
            operation="get_movie_reviews",
        )

    async def get_movie_lists(
        self,
        movie_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMovieLists]:
        params = self._paged(page, language)
        return await self._perform_api_call(
            TmdbMovieLists,
            lambda: self._url(self._methods.movie_lists, movie_id, params=params),
            operation="get_movie_lists",
        )

    async def get_movie_changes(
        self,
        movie_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TmdbResult[TmdbChanges]:
        return await self._perform_api_call(
            TmdbChanges,
            lambda: self._url(
                self._methods.movie_changes,
                movie_id,
                params=self._date_range(start_date, end_date),
            ),
            operation="get_movie_changes",
        )

    async def get_latest_movie(self) -> TmdbResult[TmdbMovie]:
        return await self._perform_api_call(
            TmdbMovie,
            lambda: self._url(self._methods.latest_movie),
            operation="get_latest_movie",
        )

    async def _get_movie_listing(
        self,
        template: str,
        operation: str,
        page: int | None,
        language: str | None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        params = self._paged(page, language)
        return await self._perform_api_call(
            TmdbMoviePreviewList,
            lambda: self._url(template, params=params),
            operation=operation,
        )

    async def get_upcoming_movies(
        self,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        return await self._get_movie_listing(
            self._methods.upcoming_movies, "get_upcoming_movies", page, language
        )

    async def get_now_playing_movies(
        self,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        return await self._get_movie_listing(
            self._methods.now_playing_movies, "get_now_playing_movies", page, language
        )

    async def get_popular_movies(
        self,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        return await self._get_movie_listing(
            self._methods.popular_movies, "get_popular_movies", page, language
        )

    async def get_top_rated_movies(
        self,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        return await self._get_movie_listing(
            self._methods.top_rated_movies, "get_top_rated_movies", page, language
        )

    async def get_movie_account_state(
        self,
        movie_id: int,
        session_id: str,
    ) -> TmdbResult[TmdbMovieAccountStates]:
        params = QueryParameters().add(self._params.session_id, session_id)
        return await self._perform_api_call(
            TmdbMovieAccountStates,
            lambda: self._url(
                self._methods.movie_account_states, movie_id, params=params
            ),
            operation="get_movie_account_state",
        )

    async def rate_movie(
        self,
        movie_id: int,
        rating_request: TmdbMovieRatingRequest,
        session_id: str | None = None,
        guest_session_id: str | None = None,
    ) -> TmdbResult[TmdbStatusResponse]:
        """Rate a movie as a user (session) or as a guest.

        The user session wins when both ids are given.
        """
        params = QueryParameters()
        if session_id is not None:
            params.add(self._params.session_id, session_id)
        else:
            params.add(self._params.guest_session_id, guest_session_id)
        return await self._perform_api_call(
            TmdbStatusResponse,
            lambda: self._url(self._methods.movie_rating, movie_id, params=params),
            body=rating_request,
            operation="rate_movie",
        )

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    async def get_collection(
        self,
        collection_id: int,
        language: str | None = None,
        append: CollectionMethod | None = None,
    ) -> TmdbResult[TmdbMovieCollection]:
        def build() -> str:
            params = QueryParameters().add(self._params.language, language)
            if append is not None:
                params.add(
                    self._params.append_to_response,
                    request_builder.collection_method_parameter(append, self.config),
                )
            return self._url(self._methods.get_collection, collection_id, params=params)

        return await self._perform_api_call(
            TmdbMovieCollection, build, operation="get_collection"
        )

    async def get_collection_images(
        self,
        collection_id: int,
        language: str | None = None,
    ) -> TmdbResult[TmdbCollectionImages]:
        params = QueryParameters().add(self._params.language, language)
        return await self._perform_api_call(
            TmdbCollectionImages,
            lambda: self._url(
                self._methods.collection_images, collection_id, params=params
            ),
            operation="get_collection_images",
        )

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------

    async def get_person(
        self,
        person_id: int,
        append: PersonMethod | None = None,
    ) -> TmdbResult[TmdbPersonInformation]:
        def build() -> str:
            params = QueryParameters()
            if append is not None:
                params.add(
                    self._params.append_to_response,
                    request_builder.person_method_parameter(append, self.config),
                )
            return self._url(self._methods.get_person, person_id, params=params)

        return await self._perform_api_call(
            TmdbPersonInformation, build, operation="get_person"
        )

    async def get_person_credits(
        self,
        person_id: int,
        language: str | None = None,
    ) -> TmdbResult[TmdbPersonCredits]:
        params = QueryParameters().add(self._params.language, language)
        return await self._perform_api_call(
            TmdbPersonCredits,
            lambda: self._url(self._methods.person_credits, person_id, params=params),
            operation="get_person_credits",
        )

    async def get_person_images(self, person_id: int) -> TmdbResult[TmdbPersonImages]:
        return await self._perform_api_call(
            TmdbPersonImages,
            lambda: self._url(self._methods.person_images, person_id),
            operation="get_person_images",
        )

    async def get_person_changes(
        self,
        person_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TmdbResult[TmdbChanges]:
        return await self._perform_api_call(
            TmdbChanges,
            lambda: self._url(
                self._methods.person_changes,
                person_id,
                params=self._date_range(start_date, end_date),
            ),
            operation="get_person_changes",
        )

    async def get_popular_persons(
        self,
        page: int | None = None,
    ) -> TmdbResult[TmdbPersonPreviewList]:
        params = QueryParameters().add(self._params.page, page)
        return await self._perform_api_call(
            TmdbPersonPreviewList,
            lambda: self._url(self._methods.popular_persons, params=params),
            operation="get_popular_persons",
        )

    async def get_latest_person(self) -> TmdbResult[TmdbPersonInformation]:
        return await self._perform_api_call(
            TmdbPersonInformation,
            lambda: self._url(self._methods.latest_person),
            operation="get_latest_person",
        )

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    async def get_list(self, list_id: str) -> TmdbResult[TmdbMovieList]:
        return await self._perform_api_call(
            TmdbMovieList,
            lambda: self._url(self._methods.get_list, list_id),
            operation="get_list",
        )

    async def get_list_status(
        self,
        list_id: str,
        movie_id: int,
    ) -> TmdbResult[TmdbMovieListStatus]:
        params = QueryParameters().add(self._params.movie_id, movie_id)
        return await self._perform_api_call(
            TmdbMovieListStatus,
            lambda: self._url(self._methods.list_status, list_id, params=params),
            operation="get_list_status",
        )

    async def create_movie_list(
        self,
        session_id: str,
        request: TmdbCreateMovieListRequest,
    ) -> TmdbResult[TmdbCreateMovieListResponse]:
        params = QueryParameters().add(self._params.session_id, session_id)
        return await self._perform_api_call(
            TmdbCreateMovieListResponse,
            lambda: self._url(self._methods.create_list, params=params),
            body=request,
            operation="create_movie_list",
        )

    async def add_item_to_list(
        self,
        list_id: str,
        item: TmdbListItemRequest,
        session_id: str,
    ) -> TmdbResult[TmdbStatusResponse]:
        params = QueryParameters().add(self._params.session_id, session_id)
        return await self._perform_api_call(
            TmdbStatusResponse,
            lambda: self._url(self._methods.list_add_item, list_id, params=params),
            body=item,
            operation="add_item_to_list",
        )

    async def remove_item_from_list(
        self,
        list_id: str,
        item: TmdbListItemRequest,
        session_id: str,
    ) -> TmdbResult[TmdbStatusResponse]:
        params = QueryParameters().add(self._params.session_id, session_id)
        return await self._perform_api_call(
            TmdbStatusResponse,
            lambda: self._url(self._methods.list_remove_item, list_id, params=params),
            body=item,
            operation="remove_item_from_list",
        )

    async def delete_list(
        self,
        list_id: str,
        session_id: str,
    ) -> TmdbResult[TmdbStatusResponse]:
        """Delete a list with an HTTP DELETE request (no body)."""
        params = QueryParameters().add(self._params.session_id, session_id)
        return await self._perform_api_call(
            TmdbStatusResponse,
            lambda: self._url(self._methods.delete_list, list_id, params=params),
            method=HttpMethod.DELETE,
            operation="delete_list",
        )

    # ------------------------------------------------------------------
    # Companies, genres, keywords
    # ------------------------------------------------------------------

    async def get_company(
        self,
        company_id: int,
        append: CompanyMethod | None = None,
    ) -> TmdbResult[TmdbCompanyInformation]:
        def build() -> str:
            params = QueryParameters()
            if append is not None:
                params.add(
                    self._params.append_to_response,
                    request_builder.company_method_parameter(append, self.config),
                )
            return self._url(self._methods.get_company, company_id, params=params)

        return await self._perform_api_call(
            TmdbCompanyInformation, build, operation="get_company"
        )

    async def get_company_movies(
        self,
        company_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        params = self._paged(page, language)
        return await self._perform_api_call(
            TmdbMoviePreviewList,
            lambda: self._url(self._methods.company_movies, company_id, params=params),
            operation="get_company_movies",
        )

    async def get_genres(self, language: str | None = None) -> TmdbResult[TmdbGenreList]:
        params = QueryParameters().add(self._params.language, language)
        return await self._perform_api_call(
            TmdbGenreList,
            lambda: self._url(self._methods.genre_list, params=params),
            operation="get_genres",
        )

    async def get_genre_movies(
        self,
        genre_id: int,
        page: int | None = None,
        language: str | None = None,
        include_all_movies: bool | None = None,
        include_adult: bool | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        params = (
            self._paged(page, language)
            .add(self._params.include_all_movies, include_all_movies)
            .add(self._params.include_adult, include_adult)
        )
        return await self._perform_api_call(
            TmdbMoviePreviewList,
            lambda: self._url(self._methods.genre_movies, genre_id, params=params),
            operation="get_genre_movies",
        )

    async def get_keyword(self, keyword_id: int) -> TmdbResult[TmdbKeyword]:
        return await self._perform_api_call(
            TmdbKeyword,
            lambda: self._url(self._methods.get_keyword, keyword_id),
            operation="get_keyword",
        )

    async def get_keyword_movies(
        self,
        keyword_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        params = self._paged(page, language)
        return await self._perform_api_call(
            TmdbMoviePreviewList,
            lambda: self._url(self._methods.keyword_movies, keyword_id, params=params),
            operation="get_keyword_movies",
        )

    # ------------------------------------------------------------------
    # Discovery and search
    # ------------------------------------------------------------------

    def _discovery_parameters(
        self,
        page: int | None,
        language: str | None,
        discovery_filter: DiscoveryFilter | None,
    ) -> QueryParameters:
        params = self._paged(page, language)
        if discovery_filter is None:
            return params

        f = discovery_filter
        names = self._params
        (
            params.add(names.certification_country, f.certification_country)
            .add(names.include_adult, f.include_adult)
            .add(names.year, f.year)
            .add(names.min_vote_count, f.min_vote_count)
            .add(names.min_vote_average, f.min_vote_average)
            .add(names.primary_release_year, f.primary_release_year)
            .add(names.min_release_date, self._date(f.min_release_date))
            .add(names.max_release_date, self._date(f.max_release_date))
            .add(names.max_certification, f.max_certification)
        )
        if f.companies:
            params.add(
                names.with_companies,
                request_builder.join_ids(f.companies, self.config.values.and_char),
            )
        if f.sort_by is not DiscoverySortBy.NONE:
            params.add(
                names.discovery_sort_by,
                request_builder.discovery_sort_by_parameter(f.sort_by, self.config),
            )
        if f.genre_filter is not None and f.genre_filter.genres:
            separator = request_builder.filter_operator_separator(
                f.genre_filter.operator, self.config
            )
            params.add(
                names.with_genres,
                request_builder.join_ids(f.genre_filter.genres, separator),
            )
        return params

    async def discover_movies(
        self,
        page: int | None = None,
        language: str | None = None,
        discovery_filter: DiscoveryFilter | None = None,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        return await self._perform_api_call(
            TmdbMoviePreviewList,
            lambda: self._url(
                self._methods.discover,
                params=self._discovery_parameters(page, language, discovery_filter),
            ),
            operation="discover_movies",
        )

    def _search_parameters(self, query: str, page: int | None) -> QueryParameters:
        return (
            QueryParameters()
            .add(self._params.query, request_builder.escape_query(query))
            .add(self._params.page, page)
        )

    def _add_search_type(
        self,
        params: QueryParameters,
        search_type: SearchType,
    ) -> QueryParameters:
        if search_type is not SearchType.NONE:
            params.add(
                self._params.search_type,
                request_builder.search_type_parameter(search_type, self.config),
            )
        return params

    async def search_movie(
        self,
        query: str,
        page: int | None = None,
        language: str | None = None,
        include_adult: bool | None = None,
        year: int | None = None,
        primary_release_year: int | None = None,
        search_type: SearchType = SearchType.NONE,
    ) -> TmdbResult[TmdbMoviePreviewList]:
        def build() -> str:
            params = (
                self._search_parameters(query, page)
                .add(self._params.language, language)
                .add(self._params.include_adult, include_adult)
                .add(self._params.year, year)
                .add(self._params.primary_release_year, primary_release_year)
            )
            self._add_search_type(params, search_type)
            return self._url(self._methods.search_movie, params=params)

        return await self._perform_api_call(
            TmdbMoviePreviewList, build, operation="search_movie"
        )

    async def search_movie_collection(
        self,
        query: str,
        page: int | None = None,
        language: str | None = None,
    ) -> TmdbResult[TmdbMovieCollectionPreviewList]:
        return await self._perform_api_call(
            TmdbMovieCollectionPreviewList,
            lambda: self._url(
                self._methods.search_collection,
                params=self._search_parameters(query, page).add(
                    self._params.language, language
                ),
            ),
            operation="search_movie_collection",
        )

    async def search_person(
        self,
        query: str,
        page: int | None = None,
        include_adult: bool | None = None,
        search_type: SearchType = SearchType.NONE,
    ) -> TmdbResult[TmdbPersonPreviewList]:
        def build() -> str:
            params = self._search_parameters(query, page).add(
                self._params.include_adult, include_adult
            )
            self._add_search_type(params, search_type)
            return self._url(self._methods.search_person, params=params)

        return await self._perform_api_call(
            TmdbPersonPreviewList, build, operation="search_person"
        )

    async def search_list(
        self,
        query: str,
        page: int | None = None,
        include_adult: bool | None = None,
    ) -> TmdbResult[TmdbMovieListPreviewList]:
        return await self._perform_api_call(
            TmdbMovieListPreviewList,
            lambda: self._url(
                self._methods.search_list,
                params=self._search_parameters(query, page).add(
                    self._params.include_adult, include_adult
                ),
            ),
            operation="search_list",
        )

    async def search_company(
        self,
        query: str,
        page: int | None = None,
    ) -> TmdbResult[TmdbCompanyPreviewList]:
        return await self._perform_api_call(
            TmdbCompanyPreviewList,
            lambda: self._url(
                self._methods.search_company,
                params=self._search_parameters(query, page),
            ),
            operation="search_company",
        )

    async def search_keyword(
        self,
        query: str,
        page: int | None = None,
    ) -> TmdbResult[TmdbKeywords]:
        return await self._perform_api_call(
            TmdbKeywords,
            lambda: self._url(
                self._methods.search_keyword,
                params=self._search_parameters(query, page),
            ),
            operation="search_keyword",
        )

    # ------------------------------------------------------------------
    # Reviews, changes, jobs
    # ------------------------------------------------------------------

    async def get_review(self, review_id: str) -> TmdbResult[TmdbReview]:
        return await self._perform_api_call(
            TmdbReview,
            lambda: self._url(self._methods.get_review, review_id),
            operation="get_review",
        )

    async def get_changed_movies(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TmdbResult[TmdbChangedEntriesList]:
        return await self._perform_api_call(
            TmdbChangedEntriesList,
            lambda: self._url(
                self._methods.changed_movies,
                params=self._date_range(start_date, end_date),
            ),
            operation="get_changed_movies",
        )

    async def get_changed_people(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TmdbResult[TmdbChangedEntriesList]:
        return await self._perform_api_call(
            TmdbChangedEntriesList,
            lambda: self._url(
                self._methods.changed_people,
                params=self._date_range(start_date, end_date),
            ),
            operation="get_changed_people",
        )

    async def get_jobs(self) -> TmdbResult[TmdbDepartments]:
        return await self._perform_api_call(
            TmdbDepartments,
            lambda: self._url(self._methods.jobs),
            operation="get_jobs",
        )

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def get_image_url(
        self,
        file_path: str,
        tmdb_configuration: TmdbConfiguration,
        size: str | None = None,
    ) -> str:
        """Url of an image; the original size is used when ``size`` is None."""
        return request_builder.image_url(
            file_path,
            tmdb_configuration.images,
            size if size is not None else self.config.original_image_size_value,
            self.config.use_secure_connection,
        )

    async def download_image(
        self,
        file_path: str,
        tmdb_configuration: TmdbConfiguration,
        file_name: str,
        size: str | None = None,
    ) -> TmdbResult[str]:
        """Download an image into ``file_name``; the result is the written path."""
        try:
            url = self.get_image_url(file_path, tmdb_configuration, size)
            download = await self.transport.download_to_file(
                url,
                file_name,
                self.config.cache_level,
                self.config.timeout,
                self.config.use_secure_connection,
            )
        except PreconditionError:
            raise
        except Exception as e:
            logger.warning("Image download of %s failed: %s", file_path, e)
            return TmdbResult(error=e)
        return TmdbResult(result=download.file_path, error=download.error)

    async def get_image(
        self,
        file_path: str,
        tmdb_configuration: TmdbConfiguration,
        size: str | None = None,
    ) -> TmdbResult[bytes]:
        """Read an image into memory."""
        try:
            url = self.get_image_url(file_path, tmdb_configuration, size)
            stream = await self.transport.read_to_bytes(
                url,
                self.config.cache_level,
                self.config.timeout,
                self.config.use_secure_connection,
            )
        except PreconditionError:
            raise
        except Exception as e:
            logger.warning("Image read of %s failed: %s", file_path, e)
            return TmdbResult(error=e)
        return TmdbResult(result=stream.content, error=stream.error)

"""High level TMDb client with concurrency control and error policy.

This module wraps TmdbApiWrapper behind a bounded concurrency gate and a
single unwrapping policy: with ``throw_on_error`` every failed call raises
TmdbError, otherwise it returns None. The client also remembers the
session, account, authentication token and remote configuration returned
by earlier calls so account-scoped operations can omit them.

Cached state is shared by every concurrent call of one client and is not
locked; two concurrent writers (e.g. two ``get_account`` calls) race and
the last write wins.
"""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Awaitable, Callable
from datetime import date
from typing import Any, TypeVar, Union

from typing_extensions import Self

from cinevault.config.settings import Settings
from cinevault.services.api_wrapper import TmdbApiWrapper
from cinevault.services.result import TmdbResult
from cinevault.services.semaphore_manager import AsyncSemaphoreManager
from cinevault.services.transport import TransportPort
from cinevault.shared.constants import NetworkConfig
from cinevault.shared.errors import (
    create_not_initialized_error,
    create_precondition_error,
)
from cinevault.shared.models import (
    CollectionMethod,
    CompanyMethod,
    DiscoveryFilter,
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

T = TypeVar("T")

# Consent callback of get_session_without_authentication_token
AcceptTokenCallback = Callable[
    [TmdbAuthenticationToken],
    Union[bool, Awaitable[bool]],
]


class TmdbClient:
    """TMDb client with bounded concurrency and cached session state.

    Every public operation takes one permit of the concurrency gate before
    it dispatches its call and gives it back afterwards, whatever the
    outcome.

    Args:
        api_wrapper: Wrapper performing the calls
        max_concurrent_requests: Number of calls allowed in flight (>= 1)
        throw_on_error: Raise TmdbError on failure instead of returning None
        language: ISO 639-1 code sent with localized calls
        include_adult: Include adult movies in searches and genre listings
        search_type: Search type sent with movie and person searches
        account_sort_by: Sort field of account movie lists
        account_sort_order: Sort order of account movie lists

    Raises:
        PreconditionError: If max_concurrent_requests is below 1

    Example:
        >>> client = TmdbClient.from_settings(get_config())
        >>> movie = await client.get_movie(550, MovieMethod.CASTS)
        >>> movie.title
        'Fight Club'
    """

    def __init__(
        self,
        api_wrapper: TmdbApiWrapper,
        max_concurrent_requests: int = NetworkConfig.DEFAULT_CONCURRENT_REQUESTS,
        throw_on_error: bool = True,
        language: str | None = None,
        include_adult: bool = True,
        search_type: SearchType = SearchType.NONE,
        account_sort_by: SortBy = SortBy.NONE,
        account_sort_order: SortOrder = SortOrder.UNSET,
    ) -> None:
        self.api_wrapper = api_wrapper
        self.semaphore_manager = AsyncSemaphoreManager(max_concurrent_requests)
        self.throw_on_error = throw_on_error
        self.language = language
        self.include_adult = include_adult
        self.search_type = search_type
        self.account_sort_by = account_sort_by
        self.account_sort_order = account_sort_order

        self._authentication_token: str | None = None
        self._session_id: str | None = None
        self._account_id: int | None = None
        self._tmdb_configuration: TmdbConfiguration | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: TransportPort | None = None,
    ) -> TmdbClient:
        """Build a client, its wrapper and (by default) an aiohttp transport."""
        if transport is None:
            from cinevault.services.http_transport import AiohttpTransport

            transport = AiohttpTransport()
        tmdb = settings.tmdb
        wrapper = TmdbApiWrapper(transport, tmdb.endpoint_configuration())
        return cls(
            wrapper,
            max_concurrent_requests=tmdb.concurrent_requests,
            throw_on_error=tmdb.throw_on_error,
            language=tmdb.language,
            include_adult=tmdb.include_adult,
            search_type=tmdb.search_type,
            account_sort_by=tmdb.account_sort_by,
            account_sort_order=tmdb.account_sort_order,
        )

    async def close(self) -> None:
        """Close the underlying transport, if it can be closed."""
        close = getattr(self.api_wrapper.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Cached state
    # ------------------------------------------------------------------

    @property
    def authentication_token(self) -> str:
        """Token of the last get_authentication_token call.

        Raises:
            NotInitializedError: If no token has been fetched yet
        """
        if self._authentication_token is None:
            raise create_not_initialized_error("authentication_token")
        return self._authentication_token

    @authentication_token.setter
    def authentication_token(self, value: str | None) -> None:
        self._authentication_token = value

    @property
    def session_id(self) -> str:
        """Id of the last session created by get_session.

        Raises:
            NotInitializedError: If no session has been created yet
        """
        if self._session_id is None:
            raise create_not_initialized_error("session_id")
        return self._session_id

    @session_id.setter
    def session_id(self, value: str | None) -> None:
        self._session_id = value

    @property
    def account_id(self) -> int:
        """Id of the account loaded by get_account.

        Raises:
            NotInitializedError: If get_account has not succeeded yet
        """
        if self._account_id is None:
            raise create_not_initialized_error("account_id")
        return self._account_id

    @account_id.setter
    def account_id(self, value: int | None) -> None:
        self._account_id = value

    @property
    def tmdb_configuration(self) -> TmdbConfiguration:
        """Remote configuration loaded by get_configuration.

        Raises:
            NotInitializedError: If get_configuration has not succeeded yet
        """
        if self._tmdb_configuration is None:
            raise create_not_initialized_error("tmdb_configuration")
        return self._tmdb_configuration

    @tmdb_configuration.setter
    def tmdb_configuration(self, value: TmdbConfiguration | None) -> None:
        self._tmdb_configuration = value

    def stats(self) -> dict[str, int]:
        """Permit usage of the concurrency gate."""
        gate = self.semaphore_manager
        return {
            "concurrency_limit": gate.concurrency_limit,
            "active": gate.get_active_count(),
            "available": gate.get_available_count(),
            "peak": gate.get_peak_count(),
        }

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _unwrap(self, result: TmdbResult[T]) -> T | None:
        if self.throw_on_error:
            return result.unwrap_or_throw()
        if result.is_error:
            logger.debug("Call failed, returning None: %s", result.error)
        return result.unwrap()

    async def _call(
        self,
        operation: Callable[..., Awaitable[TmdbResult[T]]],
        *args: Any,
    ) -> T | None:
        # Arguments are evaluated by the caller, so reading unset cached
        # state raises before a permit is taken.
        async with self.semaphore_manager:
            result = await operation(*args)
        return self._unwrap(result)

    # ------------------------------------------------------------------
    # Configuration and authentication
    # ------------------------------------------------------------------

    async def get_configuration(self) -> TmdbConfiguration | None:
        """Load the remote configuration and remember it."""
        config = await self._call(self.api_wrapper.get_configuration)
        if config is not None:
            self.tmdb_configuration = config
        return config

    async def get_authentication_token(self) -> TmdbAuthenticationToken | None:
        """Request a new authentication token and remember it."""
        token = await self._call(self.api_wrapper.get_authentication_token)
        if token is not None:
            self.authentication_token = token.token
        return token

    async def get_session(
        self,
        authentication_token: str | None = None,
    ) -> TmdbSession | None:
        """Exchange a user-approved token for a session and remember its id.

        Args:
            authentication_token: Token to exchange; defaults to the cached one
        """
        token = (
            authentication_token
            if authentication_token is not None
            else self.authentication_token
        )
        session = await self._call(self.api_wrapper.get_session, token)
        if session is not None:
            self.session_id = session.session_id
        return session

    async def get_guest_session(self) -> TmdbGuestSession | None:
        return await self._call(self.api_wrapper.get_guest_session)

    async def get_session_without_authentication_token(
        self,
        accept_token: AcceptTokenCallback | None,
    ) -> TmdbSession | None:
        """Create a session in one step.

        Requests a token, asks ``accept_token`` whether the user approved it
        and exchanges it for a session if so. The callback may be a plain
        function or a coroutine function. Each of the two calls takes its
        own permit; no permit is held while the callback runs.

        Returns:
            The new session, or None if the token was not accepted

        Raises:
            PreconditionError: If accept_token is None
        """
        if accept_token is None:
            raise create_precondition_error(
                "Token acceptance callback can not be None",
                operation="get_session_without_authentication_token",
                field="accept_token",
            )

        token = await self.get_authentication_token()
        if token is None:
            return None

        accepted = accept_token(token)
        if inspect.isawaitable(accepted):
            accepted = await accepted
        if not accepted:
            logger.info("Authentication token was not accepted")
            return None
        return await self.get_session(token.token)

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    async def get_account(self) -> TmdbAccount | None:
        """Load the account of the current session and remember its id."""
        account = await self._call(self.api_wrapper.get_account, self.session_id)
        if account is not None:
            self.account_id = account.id
        return account

    async def get_account_lists(
        self,
        page: int | None = None,
    ) -> TmdbMovieListPreviewList | None:
        return await self._call(
            self.api_wrapper.get_account_lists,
            self.account_id,
            self.session_id,
            page,
            self.language,
        )

    async def set_favorite(
        self,
        favorite_request: TmdbFavoriteRequest,
    ) -> TmdbStatusResponse | None:
        return await self._call(
            self.api_wrapper.set_favorite,
            self.account_id,
            favorite_request,
            self.session_id,
        )

    async def set_watch_list(
        self,
        watch_list_request: TmdbWatchListRequest,
    ) -> TmdbStatusResponse | None:
        return await self._call(
            self.api_wrapper.set_watch_list,
            self.account_id,
            watch_list_request,
            self.session_id,
        )

    async def get_account_favorite_movies(
        self,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_account_favorite_movies,
            self.account_id,
            self.session_id,
            page,
            self.account_sort_by,
            self.account_sort_order,
            self.language,
        )

    async def get_account_rated_movies(
        self,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_account_rated_movies,
            self.account_id,
            self.session_id,
            page,
            self.account_sort_by,
            self.account_sort_order,
            self.language,
        )

    async def get_account_watch_list(
        self,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_account_watch_list,
            self.account_id,
            self.session_id,
            page,
            self.account_sort_by,
            self.account_sort_order,
            self.language,
        )

    # ------------------------------------------------------------------
    # Movies
    # ------------------------------------------------------------------

    async def get_movie(
        self,
        movie_id: int,
        append: MovieMethod | None = None,
    ) -> TmdbMovie | None:
        """Load a movie, optionally with appended sub-resources.

        Args:
            movie_id: TMDb movie id
            append: Sub-resources to include in the same response
        """
        return await self._call(
            self.api_wrapper.get_movie, movie_id, append, self.language
        )

    async def get_alternative_movie_titles(
        self,
        movie_id: int,
        country: str | None = None,
    ) -> TmdbAlternativeTitles | None:
        return await self._call(
            self.api_wrapper.get_alternative_movie_titles, movie_id, country
        )

    async def get_movie_cast(self, movie_id: int) -> TmdbStaff | None:
        return await self._call(self.api_wrapper.get_movie_cast, movie_id)

    async def get_movie_images(self, movie_id: int) -> TmdbImages | None:
        return await self._call(
            self.api_wrapper.get_movie_images, movie_id, self.language
        )

    async def get_movie_keywords(self, movie_id: int) -> TmdbMovieKeywords | None:
        return await self._call(self.api_wrapper.get_movie_keywords, movie_id)

    async def get_movie_releases(self, movie_id: int) -> TmdbReleases | None:
        return await self._call(self.api_wrapper.get_movie_releases, movie_id)

    async def get_movie_trailers(self, movie_id: int) -> TmdbTrailers | None:
        return await self._call(self.api_wrapper.get_movie_trailers, movie_id)

    async def get_movie_translations(self, movie_id: int) -> TmdbTranslations | None:
        return await self._call(self.api_wrapper.get_movie_translations, movie_id)

    async def get_similar_movies(
        self,
        movie_id: int,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_similar_movies, movie_id, page, self.language
        )

    async def get_movie_reviews(
        self,
        movie_id: int,
        page: int | None = None,
    ) -> TmdbMovieReviews | None:
        return await self._call(
            self.api_wrapper.get_movie_reviews, movie_id, page, self.language
        )

    async def get_movie_lists(
        self,
        movie_id: int,
        page: int | None = None,
    ) -> TmdbMovieLists | None:
        return await self._call(
            self.api_wrapper.get_movie_lists, movie_id, page, self.language
        )

    async def get_movie_changes(
        self,
        movie_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TmdbChanges | None:
        return await self._call(
            self.api_wrapper.get_movie_changes, movie_id, start_date, end_date
        )

    async def get_latest_movie(self) -> TmdbMovie | None:
        return await self._call(self.api_wrapper.get_latest_movie)

    async def get_upcoming_movies(
        self,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_upcoming_movies, page, self.language
        )

    async def get_now_playing_movies(
        self,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_now_playing_movies, page, self.language
        )

    async def get_popular_movies(
        self,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(self.api_wrapper.get_popular_movies, page, self.language)

    async def get_top_rated_movies(
        self,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_top_rated_movies, page, self.language
        )

    async def get_movie_account_state(
        self,
        movie_id: int,
    ) -> TmdbMovieAccountStates | None:
        return await self._call(
            self.api_wrapper.get_movie_account_state, movie_id, self.session_id
        )

    async def rate_movie(self, movie_id: int, rating: float) -> TmdbStatusResponse | None:
        """Rate a movie with the current user session.

        Args:
            movie_id: TMDb movie id
            rating: Rating value, a multiple of 0.5
        """
        return await self._call(
            self.api_wrapper.rate_movie,
            movie_id,
            TmdbMovieRatingRequest(value=rating),
            self.session_id,
        )

    async def rate_movie_as_guest(
        self,
        movie_id: int,
        rating: float,
        guest_session_id: str,
    ) -> TmdbStatusResponse | None:
        return await self._call(
            self.api_wrapper.rate_movie,
            movie_id,
            TmdbMovieRatingRequest(value=rating),
            None,
            guest_session_id,
        )

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    async def get_collection(
        self,
        collection_id: int,
        append: CollectionMethod | None = None,
    ) -> TmdbMovieCollection | None:
        return await self._call(
            self.api_wrapper.get_collection, collection_id, self.language, append
        )

    async def get_collection_images(
        self,
        collection_id: int,
    ) -> TmdbCollectionImages | None:
        return await self._call(
            self.api_wrapper.get_collection_images, collection_id, self.language
        )

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------

    async def get_person(
        self,
        person_id: int,
        append: PersonMethod | None = None,
    ) -> TmdbPersonInformation | None:
        return await self._call(self.api_wrapper.get_person, person_id, append)

    async def get_person_credits(self, person_id: int) -> TmdbPersonCredits | None:
        return await self._call(
            self.api_wrapper.get_person_credits, person_id, self.language
        )

    async def get_person_images(self, person_id: int) -> TmdbPersonImages | None:
        return await self._call(self.api_wrapper.get_person_images, person_id)

    async def get_person_changes(
        self,
        person_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TmdbChanges | None:
        return await self._call(
            self.api_wrapper.get_person_changes, person_id, start_date, end_date
        )

    async def get_popular_persons(
        self,
        page: int | None = None,
    ) -> TmdbPersonPreviewList | None:
        return await self._call(self.api_wrapper.get_popular_persons, page)

    async def get_latest_person(self) -> TmdbPersonInformation | None:
        return await self._call(self.api_wrapper.get_latest_person)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    async def get_list(self, list_id: str) -> TmdbMovieList | None:
        return await self._call(self.api_wrapper.get_list, list_id)

    async def get_list_status(
        self,
        list_id: str,
        movie_id: int,
    ) -> TmdbMovieListStatus | None:
        return await self._call(self.api_wrapper.get_list_status, list_id, movie_id)

    async def create_movie_list(
        self,
        request: TmdbCreateMovieListRequest,
    ) -> TmdbCreateMovieListResponse | None:
        return await self._call(
            self.api_wrapper.create_movie_list, self.session_id, request
        )

    async def add_item_to_list(
        self,
        list_id: str,
        movie_id: int,
    ) -> TmdbStatusResponse | None:
        return await self._call(
            self.api_wrapper.add_item_to_list,
            list_id,
            TmdbListItemRequest(media_id=movie_id),
            self.session_id,
        )

    async def remove_item_from_list(
        self,
        list_id: str,
        movie_id: int,
    ) -> TmdbStatusResponse | None:
        return await self._call(
            self.api_wrapper.remove_item_from_list,
            list_id,
            TmdbListItemRequest(media_id=movie_id),
            self.session_id,
        )

    async def delete_list(self, list_id: str) -> TmdbStatusResponse | None:
        return await self._call(
            self.api_wrapper.delete_list, list_id, self.session_id
        )

    # ------------------------------------------------------------------
    # Companies, genres, keywords
    # ------------------------------------------------------------------

    async def get_company(
        self,
        company_id: int,
        append: CompanyMethod | None = None,
    ) -> TmdbCompanyInformation | None:
        return await self._call(self.api_wrapper.get_company, company_id, append)

    async def get_company_movies(
        self,
        company_id: int,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_company_movies, company_id, page, self.language
        )

    async def get_genres(self) -> TmdbGenreList | None:
        return await self._call(self.api_wrapper.get_genres, self.language)

    async def get_genre_movies(
        self,
        genre_id: int,
        page: int | None = None,
        include_all_movies: bool | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_genre_movies,
            genre_id,
            page,
            self.language,
            include_all_movies,
            self.include_adult,
        )

    async def get_keyword(self, keyword_id: int) -> TmdbKeyword | None:
        return await self._call(self.api_wrapper.get_keyword, keyword_id)

    async def get_keyword_movies(
        self,
        keyword_id: int,
        page: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.get_keyword_movies, keyword_id, page, self.language
        )

    # ------------------------------------------------------------------
    # Discovery and search
    # ------------------------------------------------------------------

    async def discover_movies(
        self,
        page: int | None = None,
        discovery_filter: DiscoveryFilter | None = None,
    ) -> TmdbMoviePreviewList | None:
        return await self._call(
            self.api_wrapper.discover_movies, page, self.language, discovery_filter
        )

    async def search_movie(
        self,
        query: str,
        page: int | None = None,
        year: int | None = None,
        primary_release_year: int | None = None,
    ) -> TmdbMoviePreviewList | None:
        """Search movies by title.

        Language, adult filter and search type come from the client defaults.
        """
        return await self._call(
            self.api_wrapper.search_movie,
            query,
            page,
            self.language,
            self.include_adult,
            year,
            primary_release_year,
            self.search_type,
        )

    async def search_movie_collection(
        self,
        query: str,
        page: int | None = None,
    ) -> TmdbMovieCollectionPreviewList | None:
        return await self._call(
            self.api_wrapper.search_movie_collection, query, page, self.language
        )

    async def search_person(
        self,
        query: str,
        page: int | None = None,
    ) -> TmdbPersonPreviewList | None:
        return await self._call(
            self.api_wrapper.search_person,
            query,
            page,
            self.include_adult,
            self.search_type,
        )

    async def search_list(
        self,
        query: str,
        page: int | None = None,
    ) -> TmdbMovieListPreviewList | None:
        return await self._call(
            self.api_wrapper.search_list, query, page, self.include_adult
        )

    async def search_company(
        self,
        query: str,
        page: int | None = None,
    ) -> TmdbCompanyPreviewList | None:
        return await self._call(self.api_wrapper.search_company, query, page)

    async def search_keyword(
        self,
        query: str,
        page: int | None = None,
    ) -> TmdbKeywords | None:
        return await self._call(self.api_wrapper.search_keyword, query, page)

    # ------------------------------------------------------------------
    # Reviews, changes, jobs
    # ------------------------------------------------------------------

    async def get_review(self, review_id: str) -> TmdbReview | None:
        return await self._call(self.api_wrapper.get_review, review_id)

    async def get_changed_movies(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TmdbChangedEntriesList | None:
        return await self._call(
            self.api_wrapper.get_changed_movies, start_date, end_date
        )

    async def get_changed_people(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TmdbChangedEntriesList | None:
        return await self._call(
            self.api_wrapper.get_changed_people, start_date, end_date
        )

    async def get_jobs(self) -> TmdbDepartments | None:
        return await self._call(self.api_wrapper.get_jobs)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def get_image_url(self, file_path: str, size: str | None = None) -> str:
        """Url of an image, using the cached remote configuration.

        Raises:
            NotInitializedError: If get_configuration has not succeeded yet
        """
        return self.api_wrapper.get_image_url(file_path, self.tmdb_configuration, size)

    async def download_image(
        self,
        file_path: str,
        file_name: str,
        size: str | None = None,
    ) -> str | None:
        """Download an image to ``file_name`` and return the written path."""
        return await self._call(
            self.api_wrapper.download_image,
            file_path,
            self.tmdb_configuration,
            file_name,
            size,
        )

    async def get_image(self, file_path: str, size: str | None = None) -> bytes | None:
        return await self._call(
            self.api_wrapper.get_image, file_path, self.tmdb_configuration, size
        )

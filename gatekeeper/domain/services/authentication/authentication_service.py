"""Authentication Domain Service.

Turns a transport credential string into either a signed session token or an
explicit rejection, and enforces the email-verification gate. While an account
is unverified, every login attempt with the right password rotates the user's
activation token and re-sends the activation email before rejecting.
"""

import asyncio

import structlog
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from gatekeeper.core.exceptions import DatabaseError, MalformedCredentialError
from gatekeeper.domain.entities.token import Token, TokenType
from gatekeeper.domain.entities.user import User
from gatekeeper.domain.interfaces import (
    IEmailTemplateRenderer,
    INotifier,
    ISessionSigner,
    ITokenStore,
    IUserDirectory,
)
from gatekeeper.domain.services.credential_codec import CredentialCodec
from gatekeeper.domain.value_objects.auth_result import AuthError, AuthResult, Failure, Success
from gatekeeper.domain.value_objects.email import mask_email
from gatekeeper.domain.value_objects.mail import MailAddress, MailerConfig, MailMessage

logger = structlog.get_logger(__name__)


class AuthenticationService:
    """Domain service orchestrating the authenticate-or-reject decision.

    The service holds no per-attempt state, so one instance can serve
    concurrent attempts. Consistency between concurrent attempts for the same
    user (at most one live activation token) is left to the stores.

    Business rejections come back as `Failure` values. Infrastructure errors
    raised by collaborators propagate unchanged; steps of the activation
    rotation are not atomic, so a failure part-way through can leave a new
    token without a sent email.
    """

    def __init__(
        self,
        user_directory: IUserDirectory,
        token_store: ITokenStore,
        notifier: INotifier,
        session_signer: ISessionSigner,
        template_renderer: IEmailTemplateRenderer,
        mailer_config: MailerConfig,
        codec: CredentialCodec = None,
        token_removal_attempts: int = 3,
    ):
        """Initialize the service with its collaborators.

        Args:
            user_directory: User lookup and persistence.
            token_store: Single-use token persistence.
            notifier: Email delivery.
            session_signer: Session token issuance.
            template_renderer: Activation email rendering.
            mailer_config: Sender identity and activation subject.
            codec: Credential codec, defaults to `CredentialCodec`.
            token_removal_attempts: Attempts per stale token removal before a
                `DatabaseError` propagates.
        """
        self._user_directory = user_directory
        self._token_store = token_store
        self._notifier = notifier
        self._session_signer = session_signer
        self._template_renderer = template_renderer
        self._mailer_config = mailer_config
        self._codec = codec or CredentialCodec()
        self._token_removal_attempts = token_removal_attempts

    async def authenticate(self, raw_credential: str) -> AuthResult:
        """Authenticate a transport credential string.

        Flow (short-circuiting):
        1. Decode the credential.
        2. Look the user up by email.
        3. Verify the password in constant time.
        4. Unverified user: rotate the activation token, send the activation
           email, reject with ``ACCOUNT_NOT_ACTIVATED``.
        5. Verified user: issue a session token.

        Args:
            raw_credential: ``"<scheme> <base64(email:password)>"``.

        Returns:
            ``Success(SessionToken)`` or ``Failure(AuthError)``.
        """
        try:
            credential = self._codec.decode(raw_credential)
        except MalformedCredentialError as e:
            logger.info("Authentication rejected", reason=e.code)
            return Failure(AuthError.INVALID_CREDENTIAL_FORMAT)

        log = logger.bind(email=mask_email(credential.email))

        user = await self._user_directory.find_one(credential.email)
        if user is None:
            log.info("Authentication rejected", reason="account_not_found")
            return Failure(AuthError.ACCOUNT_NOT_FOUND)

        log = log.bind(user_id=user.id)

        if not user.password.verify(credential.password):
            log.info("Authentication rejected", reason="invalid_password")
            return Failure(AuthError.INVALID_PASSWORD)

        if not user.is_verified:
            await self._reissue_activation(user)
            log.info("Authentication rejected", reason="account_not_activated")
            return Failure(AuthError.ACCOUNT_NOT_ACTIVATED)

        session_token = await self._session_signer.issue(user)
        log.info("Authentication successful", token=session_token.mask_for_logging())
        return Success(session_token)

    async def _reissue_activation(self, user: User) -> Token:
        """Replace the user's live activation tokens with a new one and email it."""
        stale_tokens = await self._token_store.find_by_type_and_owner_and_used(
            TokenType.ACTIVATION, user.id, False
        )
        # Every removal must finish before the replacement exists, failed or not
        outcomes = await asyncio.gather(
            *(self._remove_token(token.id) for token in stale_tokens),
            return_exceptions=True,
        )
        errors = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
        if errors:
            logger.error(
                "Stale activation token removal failed",
                user_id=user.id,
                failed=len(errors),
                total=len(stale_tokens),
            )
            raise errors[0]

        token = Token.create(type=TokenType.ACTIVATION, user_id=user.id, used=False)
        user.add_token(token)
        await self._user_directory.save(user)
        await self._token_store.save_single(token)

        await self._notifier.send(
            MailMessage(
                to=MailAddress(name=user.username.value, email=user.email.value),
                sender=self._mailer_config.sender,
                subject=self._mailer_config.activation_subject,
                body=self._template_renderer.render_activation_email(user.username.value, token.id),
            )
        )

        logger.info(
            "Activation token reissued",
            user_id=user.id,
            invalidated_tokens=len(stale_tokens),
        )
        return token

    async def _remove_token(self, token_id: str) -> None:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._token_removal_attempts),
            wait=wait_exponential(multiplier=0.05, max=1),
            retry=retry_if_exception_type(DatabaseError),
            reraise=True,
        ):
            with attempt:
                await self._token_store.remove(token_id)

"""Email service for sending account verification mail over SMTP."""

import logging
import smtplib
from email.message import EmailMessage

from src.config import Settings, get_settings

logger = logging.getLogger(__name__)


class EmailService:
    """Builds and delivers transactional emails."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.app_name = "Movie App"

    def verification_link(self, token: str) -> str:
        """Link the user follows to verify their email address."""
        return f"{self.settings.app_base_url.rstrip('/')}/verify-email?token={token}"

    def build_verification_message(self, to_email: str, token: str) -> EmailMessage:
        """Build the verification email with plain-text and HTML bodies."""
        link = self.verification_link(token)

        message = EmailMessage()
        message["From"] = self.settings.mail_from
        message["To"] = to_email
        message["Subject"] = f"Welcome! Verify your {self.app_name} account"
        message.set_content(
            f"Hi! Thanks for signing up. Open the following link to verify your account: {link}"
        )
        message.add_alternative(self._build_verification_html(link), subtype="html")
        return message

    def send_verification(self, to_email: str, token: str) -> bool:
        """Send the verification email.

        Returns True on success, False on failure.
        """
        if not self.settings.smtp_host:
            logger.warning(f"SMTP not configured, verification email to {to_email} not sent")
            return False

        message = self.build_verification_message(to_email, token)

        try:
            with smtplib.SMTP(self.settings.smtp_host, self.settings.smtp_port, timeout=30) as smtp:
                if self.settings.smtp_use_tls:
                    smtp.starttls()
                if self.settings.smtp_user and self.settings.smtp_password:
                    smtp.login(self.settings.smtp_user, self.settings.smtp_password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.exception(f"Verification email to {to_email} failed: {e}")
            return False

        logger.info(f"Verification email sent to {to_email}")
        return True

    def _build_verification_html(self, link: str) -> str:
        """Build HTML content for the verification email."""
        return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <h1>Welcome to {self.app_name}!</h1>
            <p>Thanks for signing up. Click the button below to verify your account.</p>
            <p style="margin: 30px 0;">
                <a href="{link}"
                   style="background-color: #007bff; color: white; padding: 10px 20px;
                          text-decoration: none; border-radius: 5px;">
                    Verify my account
                </a>
            </p>
            <p>If the button does not work, copy this link into your browser:</p>
            <p>{link}</p>
        </div>
        """

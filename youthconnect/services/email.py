"""Email service for account confirmation and application receipts."""
import logging

from youthconnect.config import settings

logger = logging.getLogger(__name__)

SENDER_ADDRESS = "noreply@youthconnect.app"
SENDER_NAME = "YouthConnect"


class EmailService:
    """Handles email sending in dev and production modes."""

    def __init__(self):
        self.mode = settings.email_mode
        if self.mode == "prod":
            try:
                from sendgrid import SendGridAPIClient
                self.sendgrid_client = SendGridAPIClient(settings.sendgrid_api_key)
            except ImportError:
                logger.error("SendGrid not installed but email_mode is 'prod'")
                raise
        else:
            self.sendgrid_client = None

    async def send_verification_email(self, email: str, verify_link: str) -> bool:
        """Send the signup confirmation link."""
        subject = "Confirm your YouthConnect account"

        html_content = f"""
        <html>
            <body style="font-family: Arial, sans-serif; background-color: #f4f4f4; padding: 20px;">
                <div style="max-width: 600px; margin: 0 auto; background-color: white; padding: 40px; border-radius: 8px;">
                    <h2 style="color: #333; margin-bottom: 20px;">Welcome to YouthConnect</h2>
                    <p style="color: #666; font-size: 16px; line-height: 1.6;">
                        Your gateway to career opportunities. Confirm your email to start applying:
                    </p>
                    <p style="margin: 30px 0;">
                        <a href="{verify_link}" style="background-color: #007bff; color: white; padding: 12px 30px; text-decoration: none; border-radius: 5px; display: inline-block; font-weight: bold;">
                            Confirm Email
                        </a>
                    </p>
                    <p style="color: #999; font-size: 14px; margin-top: 30px; border-top: 1px solid #eee; padding-top: 20px;">
                        Or copy this link: <br>
                        <code style="background-color: #f5f5f5; padding: 10px; border-radius: 3px; word-break: break-all;">
                            {verify_link}
                        </code>
                    </p>
                </div>
            </body>
        </html>
        """

        text_content = f"""
        Welcome to YouthConnect!

        Confirm your email to start applying:
        {verify_link}
        """

        return await self._send_email(email, subject, text_content, html_content)

    async def send_application_receipt(self, email: str, job_title: str, company: str) -> bool:
        """Confirm to the applicant that their application was received."""
        subject = f"Application received: {job_title} at {company}"

        html_content = f"""
        <html>
            <body style="font-family: Arial, sans-serif; background-color: #f4f4f4; padding: 20px;">
                <div style="max-width: 600px; margin: 0 auto; background-color: white; padding: 40px; border-radius: 8px;">
                    <h2 style="color: #333; margin-bottom: 20px;">Application submitted!</h2>
                    <p style="color: #666; font-size: 16px; line-height: 1.6;">
                        Your application for <strong>{job_title}</strong> at <strong>{company}</strong> has been submitted.
                        We'll be in touch soon!
                    </p>
                </div>
            </body>
        </html>
        """

        text_content = f"""
        Application submitted!

        Your application for {job_title} at {company} has been submitted.
        We'll be in touch soon!
        """

        return await self._send_email(email, subject, text_content, html_content)

    async def _send_email(self, to_email: str, subject: str, text_content: str, html_content: str) -> bool:
        """Internal method to send email via SendGrid or dev console."""
        if self.mode == "dev":
            logger.info(f"[DEV MODE] Email to {to_email}: {subject}")
            logger.info(f"[DEV MODE] Content:\n{text_content}")
            return True

        try:
            from sendgrid.helpers.mail import Mail, Email, To, Content

            mail = Mail(
                from_email=Email(SENDER_ADDRESS, SENDER_NAME),
                to_emails=To(to_email),
                subject=subject,
                plain_text_content=Content("text/plain", text_content),
                html_content=Content("text/html", html_content)
            )

            response = self.sendgrid_client.send(mail)

            if 200 <= response.status_code < 300:
                logger.info(f"Email sent to {to_email}: {subject}")
                return True
            else:
                logger.error(f"Failed to send email to {to_email}: {response.status_code}")
                return False
        except Exception as e:
            logger.error(f"Error sending email to {to_email}: {str(e)}")
            return False


# Global email service instance
email_service = EmailService()

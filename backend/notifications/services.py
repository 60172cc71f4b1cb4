from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils import timezone
import logging

logger = logging.getLogger(__name__)


class EmailService:
    def __init__(self):
        # Format the sender's email to include a display name
        from_email_address = getattr(
            settings, "DEFAULT_FROM_EMAIL", "no-reply@eats.local"
        )
        self.default_from_email = f"Eats <{from_email_address}>"

    def send_email(self, recipient_list, subject, template_name, context):
        """
        Sends an email using a Django template.

        Args:
            recipient_list (list): A list of recipient email addresses.
            subject (str): The subject of the email.
            template_name (str): The path to the email template (e.g., 'emails/verify-email.html').
            context (dict): A dictionary of data to render in the template.
        """
        html_message = render_to_string(template_name, context)
        send_mail(
            subject,
            "",  # Empty message, as we are sending HTML
            self.default_from_email,
            recipient_list,
            html_message=html_message,
            fail_silently=False,
        )

    def send_verification_email(self, email, code):
        """
        Send the account confirmation email carrying a verification code.

        Delivery problems are logged and reported through the return value;
        they never propagate to the caller.
        """
        try:
            frontend_url = getattr(settings, "FRONTEND_URL", "http://localhost:3000")
            context = {
                "email": email,
                "code": code,
                "verification_url": f"{frontend_url}/confirm?code={code}",
                "current_year": timezone.now().year,
            }

            self.send_email(
                recipient_list=[email],
                subject="Verify Your Email",
                template_name="emails/verify-email.html",
                context=context,
            )

            logger.info(f"Verification email sent to {email}")
            return True

        except Exception as e:
            logger.error(f"Failed to send verification email to {email}: {e}")
            return False


# Singleton instance
email_service = EmailService()

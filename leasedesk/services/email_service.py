from fastapi_mail import FastMail, MessageSchema, ConnectionConfig

from leasedesk.config import (
    EMAIL_FROM,
    EMAIL_FROM_NAME,
    EMAIL_PORT,
    EMAIL_SERVER,
    EMAIL_SUPPRESS_SEND,
)


class EmailService:
    def __init__(self):
        try:
            self.config = ConnectionConfig(
                MAIL_USERNAME="",
                MAIL_PASSWORD="",
                MAIL_FROM=EMAIL_FROM,
                MAIL_PORT=EMAIL_PORT,
                MAIL_SERVER=EMAIL_SERVER,
                MAIL_FROM_NAME=EMAIL_FROM_NAME,
                MAIL_STARTTLS=False,
                MAIL_SSL_TLS=False,
                USE_CREDENTIALS=False,
                VALIDATE_CERTS=False,
                SUPPRESS_SEND=1 if EMAIL_SUPPRESS_SEND else 0,
            )
            self.mailer = FastMail(self.config)
        except Exception as e:
            raise RuntimeError(f"Failed to initialize email service: {str(e)}") from e

    async def send_email(self, to_email: str, subject: str, body: str):
        """Send a generic email"""
        message = MessageSchema(
            subject=subject,
            recipients=[to_email],
            body=body,
            subtype="plain",
        )
        await self.mailer.send_message(message)

    async def send_invitation_email(
        self,
        email: str,
        invite_link: str,
        building_name: str,
        unit_number: str,
    ):
        await self.send_email(
            email,
            f"You're invited to {building_name}",
            f"""Hello,

Your landlord has invited you to join {building_name} as the tenant of unit {unit_number}.

Accept the invitation and create your account here:
{invite_link}

This link can only be used once and expires soon.

Best regards,
The LeaseDesk Team""",
        )

    async def send_payment_receipt_email(
        self,
        email: str,
        full_name: str,
        amount: int,
        currency: str,
        period: str,
        reference: str,
    ):
        await self.send_email(
            email,
            f"Payment received - {period}",
            f"""Hello {full_name},

We have received your rent payment of {currency} {amount / 100:,.2f} for {period}.

Reference: {reference}

Thank you.

Best regards,
The LeaseDesk Team""",
        )

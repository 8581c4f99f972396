"""Invitation email templates rendered with Jinja2."""

from datetime import datetime

from jinja2 import BaseLoader, Environment, TemplateNotFound, select_autoescape
from pydantic import BaseModel

from portal.domain.value import Role


class RenderedEmail(BaseModel):
    """Subject and body ready for the provider."""

    subject: str
    html: str


class TemplateLoader(BaseLoader):
    """In-process template loader for email templates."""

    def __init__(self) -> None:
        self.templates = {
            "invite_subject": "You're invited to join {{ product_name }} as {{ role_name }}",
            "invite": """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>You're invited to {{ product_name }}</title>
</head>
<body style="margin:0;padding:0;background-color:#0a0a0a;font-family:Arial,sans-serif;">
    <table role="presentation" width="100%" cellspacing="0" cellpadding="0">
        <tr>
            <td align="center" style="padding:40px 20px;">
                <table role="presentation" width="600" cellspacing="0" cellpadding="0"
                       style="background-color:#1a1a1a;border-radius:12px;">
                    <tr>
                        <td align="center" style="padding:32px;">
                            <img src="{{ logo_url }}" alt="{{ product_name }}" width="180">
                        </td>
                    </tr>
                    <tr>
                        <td style="padding:0 40px 32px;color:#e5e5e5;">
                            <h1 style="color:#ffffff;">You're Invited!</h1>
                            <p>Hello!</p>
                            <p>
                                <strong>{{ inviter_name }}</strong> has invited you to join
                                {{ product_name }} as
                                <strong style="color:{{ role_color }};">{{ role_name }}</strong>.
                            </p>
                            <p>Click the button below to create your account and get started:</p>
                            <p style="text-align:center;">
                                <a href="{{ invite_link }}"
                                   style="display:inline-block;background-color:#f97316;color:#ffffff;padding:14px 32px;border-radius:8px;text-decoration:none;font-weight:bold;">
                                    Create Your Account
                                </a>
                            </p>
                            <p>If the button doesn't work, copy and paste this link into your browser:</p>
                            <p style="word-break:break-all;color:#f97316;">{{ invite_link }}</p>
                            <p style="color:#a3a3a3;font-size:13px;">
                                This invitation expires in {{ expiry_days }} days.
                                If you didn't expect this invitation, you can safely ignore this email.
                            </p>
                        </td>
                    </tr>
                    <tr>
                        <td align="center" style="padding:24px;color:#737373;font-size:12px;">
                            &copy; {{ year }} {{ product_name }}. All rights reserved.
                        </td>
                    </tr>
                </table>
            </td>
        </tr>
    </table>
</body>
</html>
""",
        }

    def get_source(self, environment, template):
        if template not in self.templates:
            raise TemplateNotFound(template)
        source = self.templates[template]
        return source, None, lambda: True


class InviteEmailRenderer:
    """Renders the invitation email for a role and link."""

    def __init__(self, product_name: str, logo_url: str, expiry_days: int = 7) -> None:
        self.product_name = product_name
        self.logo_url = logo_url
        self.expiry_days = expiry_days
        self.env = Environment(
            loader=TemplateLoader(),
            autoescape=select_autoescape(default=True, default_for_string=True),
        )
        # Subject is plain text, so it is rendered without HTML escaping
        self.subject_env = self.env.overlay(autoescape=False)

    def render_invite(
        self, role: Role, invite_link: str, inviter_name: str
    ) -> RenderedEmail:
        """Render subject and HTML body.

        Args:
            role: Invited role
            invite_link: Account creation link
            inviter_name: Name shown as the sender of the invitation

        Returns:
            Rendered email
        """
        context = {
            "product_name": self.product_name,
            "role_name": role.display_name,
            # Client invites keep the orange highlight, other roles stay white
            "role_color": "#f97316" if role == Role.CLIENT else "#ffffff",
            "inviter_name": inviter_name,
            "invite_link": invite_link,
            "logo_url": self.logo_url,
            "expiry_days": self.expiry_days,
            "year": datetime.now().year,
        }
        subject = self.subject_env.get_template("invite_subject").render(**context)
        html = self.env.get_template("invite").render(**context)
        return RenderedEmail(subject=subject, html=html)

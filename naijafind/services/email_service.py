"""
Email service - transactional email over the Resend HTTP API.

Docs: https://resend.com/docs/api-reference/emails/send-email

Sending never raises: every send_* method returns {'success': bool, ...}
and callers only log failures. Without RESEND_API_KEY the service runs
in dev mode and just logs the message.
"""

import logging
from typing import Optional

import requests
from flask import current_app

logger = logging.getLogger(__name__)

BUTTON_STYLE = (
    'background-color: #10b981; color: white; padding: 12px 24px; '
    'text-decoration: none; border-radius: 8px; display: inline-block;'
)
SIGNATURE = '<p>Best regards,<br>The Olufinja Team</p>'


class EmailService:
    """
    Sends emails through Resend.

    Configuration (app.config):
    - RESEND_API_KEY: API key, empty = dev mode
    - FROM_EMAIL: sender address
    - CONTACT_EMAIL: inbox for the site contact form
    - FRONTEND_URL: base URL for links in emails
    """

    API_URL = 'https://api.resend.com/emails'

    @property
    def api_key(self) -> str:
        return current_app.config.get('RESEND_API_KEY', '')

    @property
    def from_email(self) -> str:
        return current_app.config.get('FROM_EMAIL', 'onboarding@resend.dev')

    @property
    def frontend_url(self) -> str:
        return current_app.config.get('FRONTEND_URL', 'https://Olufinja.com').rstrip('/')

    def send(self, to_email: str, subject: str, html: str,
             from_email: Optional[str] = None) -> dict:
        """
        Sends a single email.

        Returns:
            {'success': True, 'email_id': ...} or {'success': False, 'error': ...}
        """
        if not self.api_key:
            logger.info('[DEV EMAIL] To: %s Subject: %s', to_email, subject)
            return {'success': True, 'email_id': None, 'dev_mode': True}

        try:
            response = requests.post(
                self.API_URL,
                json={
                    'from': from_email or self.from_email,
                    'to': to_email,
                    'subject': subject,
                    'html': html,
                },
                headers={
                    'Authorization': f'Bearer {self.api_key}',
                    'Content-Type': 'application/json',
                },
                timeout=10
            )
        except requests.RequestException as e:
            logger.error('Failed to send email to %s: %s', to_email, e)
            return {'success': False, 'error': str(e)}

        if response.status_code not in (200, 201, 202):
            try:
                error = response.json().get('message')
            except ValueError:
                error = None
            logger.error('Resend API error %s: %s', response.status_code, response.text)
            return {'success': False, 'error': error or 'Failed to send email'}

        email_id = response.json().get('id')
        logger.info('Email sent to %s (id=%s)', to_email, email_id)
        return {'success': True, 'email_id': email_id}

    # ============== Contact ==============

    def send_contact_email(self, name: str, email: str, subject: str,
                           message: str, contact_type: str = 'general') -> dict:
        """Site contact form -> CONTACT_EMAIL inbox."""
        html = f"""
        <h2>New Contact Form Submission</h2>
        <p><strong>From:</strong> {name} ({email})</p>
        <p><strong>Subject:</strong> {subject}</p>
        <p><strong>Type:</strong> {contact_type}</p>
        <p><strong>Message:</strong></p>
        <p>{message}</p>
        """
        return self.send(
            current_app.config.get('CONTACT_EMAIL', 'contact@Olufinja.com'),
            f'[Contact Form] {subject}',
            html
        )

    def send_supplier_contact_email(self, supplier, sender_name: str, sender_email: str,
                                    subject: str, message: str,
                                    sender_phone: Optional[str] = None) -> dict:
        """Buyer message forwarded to the supplier's email."""
        phone_line = f'<p><strong>Phone:</strong> {sender_phone}</p>' if sender_phone else ''
        html = f"""
        <h2>New Message for {supplier.business_name}</h2>
        <p><strong>From:</strong> {sender_name}</p>
        <p><strong>Email:</strong> {sender_email}</p>
        {phone_line}
        <p><strong>Subject:</strong> {subject}</p>
        <p><strong>Message:</strong></p>
        <p>{message}</p>
        <hr>
        <p><small>Reply to this message by responding directly to this email or contact {sender_email}</small></p>
        """
        return self.send(supplier.email, f'[Olufinja] New message from {sender_name}', html)

    # ============== Accounts ==============

    def send_welcome_email(self, email: str, first_name: Optional[str] = None,
                           user_type: str = 'user') -> dict:
        greeting = f', {first_name}' if first_name else ''
        if user_type == 'supplier':
            body = f"""
            <p>As a supplier, you can now:</p>
            <ul>
              <li>Create your business profile</li>
              <li>Showcase your products and services</li>
              <li>Connect with customers across Nigeria</li>
              <li>Grow your business presence online</li>
            </ul>
            <p><a href="{self.frontend_url}/auth/supplier-setup" style="{BUTTON_STYLE}">Complete Your Profile</a></p>
            """
        else:
            body = f"""
            <p>Start exploring thousands of suppliers and businesses across Nigeria.</p>
            <p><a href="{self.frontend_url}/search" style="{BUTTON_STYLE}">Find Suppliers</a></p>
            """
        html = f"""
        <h2>Welcome to Olufinja{greeting}!</h2>
        <p>We're thrilled to have you join our community.</p>
        {body}
        <p>If you have any questions, our support team is always here to help.</p>
        {SIGNATURE}
        """
        return self.send(email, 'Welcome to Olufinja!', html)

    def send_supplier_approval_email(self, supplier, approved: bool,
                                     reason: Optional[str] = None) -> dict:
        """Approval or rejection of a supplier application."""
        dashboard_link = f'{self.frontend_url}/dashboard'
        if approved:
            subject = 'Your Olufinja supplier account has been approved!'
            html = f"""
            <h2>Congratulations! Your supplier account is now active</h2>
            <p>Dear {supplier.business_name},</p>
            <p>We're excited to inform you that your supplier account has been approved and is now active on Olufinja!</p>
            <p>You can now list your products and services and receive customer inquiries.</p>
            <p><a href="{dashboard_link}" style="{BUTTON_STYLE}">Go to Dashboard</a></p>
            {SIGNATURE}
            """
        else:
            subject = 'Update on your Olufinja supplier application'
            reason_line = f'<p><strong>Reason:</strong> {reason}</p>' if reason else ''
            html = f"""
            <h2>Update on your supplier application</h2>
            <p>Dear {supplier.business_name},</p>
            <p>Thank you for your interest in joining Olufinja. We need you to provide additional
            information or make some updates before we can approve your account.</p>
            {reason_line}
            <p><a href="{dashboard_link}" style="{BUTTON_STYLE}">Review Application</a></p>
            {SIGNATURE}
            """
        return self.send(supplier.email, subject, html)

    # ============== Newsletter ==============

    def send_newsletter_welcome(self, email: str, name: Optional[str] = None,
                                welcome_back: bool = False) -> dict:
        if welcome_back:
            subject = 'Welcome back to Olufinja newsletter!'
            html = f"""
            <h2>Welcome back!</h2>
            <p>Hi {name or 'there'},</p>
            <p>You've successfully resubscribed to the Olufinja newsletter. We're excited to have you back!</p>
            {SIGNATURE}
            """
        else:
            subject = 'Welcome to Olufinja newsletter!'
            html = f"""
            <h2>Welcome to Olufinja!</h2>
            <p>Hi {name or 'there'},</p>
            <p>Thank you for subscribing to our newsletter. You're now part of a community that
            stays informed about the best suppliers and businesses in Nigeria.</p>
            <p><a href="{self.frontend_url}/search" style="{BUTTON_STYLE}">Start Exploring</a></p>
            {SIGNATURE}
            """
        return self.send(email, subject, html)


# Singleton instance
email_service = EmailService()

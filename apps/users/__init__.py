"""Users app package.

This module initializes the users app: the email-keyed account model with
roles and statuses, cookie-borne JWT session handling and the account API.
Use ``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout the
project.
"""

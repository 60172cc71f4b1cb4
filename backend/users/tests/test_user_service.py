"""
User Service Tests

Covers the account lifecycle through UserService:
- Account creation (duplicate email, verification record, verification mail)
- Login (unknown user, wrong password, token issuance)
- Profile edits (email change resets verification, password rehash)
- Email verification (unknown code, single use)
- Password hashing on save
"""
import pytest
from unittest.mock import patch
from django.core import mail

from users.exceptions import PasswordHashingError
from users.models import User, Verification
from users.services import UserService


@pytest.mark.django_db
class TestCreateAccount:
    """Test account creation"""

    def test_create_account_persists_user_and_verification(self):
        result = UserService.create_account('new@eats.com', 'secret123', User.Role.CLIENT)

        assert result == {'ok': True, 'error': None}
        user = User.objects.get(email='new@eats.com')
        assert user.role == User.Role.CLIENT
        assert user.verified is False
        assert Verification.objects.filter(user=user).exists()

    def test_create_account_twice_with_same_email_fails(self):
        """Second sign-up with the same email is rejected"""
        UserService.create_account('dup@eats.com', 'secret123', User.Role.OWNER)

        result = UserService.create_account('dup@eats.com', 'other456', User.Role.CLIENT)

        assert result['ok'] is False
        assert result['error'] == 'There is a user with that email already'
        assert User.objects.filter(email='dup@eats.com').count() == 1

    def test_create_account_sends_verification_email_with_code(self):
        UserService.create_account('mail@eats.com', 'secret123', User.Role.CLIENT)

        code = Verification.objects.get(user__email='mail@eats.com').code
        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ['mail@eats.com']
        assert message.subject == 'Verify Your Email'
        html_body = message.alternatives[0][0]
        assert code in html_body

    def test_create_account_succeeds_when_mail_delivery_fails(self):
        """Mail failures are logged by the email service and never surface"""
        with patch('notifications.services.send_mail', side_effect=Exception('SMTP down')):
            result = UserService.create_account('nomail@eats.com', 'secret123', User.Role.CLIENT)

        assert result['ok'] is True
        assert User.objects.filter(email='nomail@eats.com').exists()

    def test_create_account_reports_generic_error_on_failure(self):
        with patch.object(User.objects, 'create_user', side_effect=Exception('db down')):
            result = UserService.create_account('broken@eats.com', 'secret123', User.Role.CLIENT)

        assert result == {'ok': False, 'error': "Couldn't create user"}

    def test_password_is_hashed_before_persistence(self):
        UserService.create_account('hash@eats.com', 'secret123', User.Role.CLIENT)

        user = User.objects.get(email='hash@eats.com')
        assert user.password != 'secret123'
        assert user.check_password('secret123')


@pytest.mark.django_db
class TestLogin:
    """Test login and token issuance"""

    def test_login_with_correct_credentials_returns_token(self, client_user):
        result = UserService.login('client@eats.com', 'password123')

        assert result['ok'] is True
        assert result['token']

        client_user.refresh_from_db()
        assert client_user.last_login is not None

    def test_login_with_wrong_password_fails_without_token(self, client_user):
        result = UserService.login('client@eats.com', 'wrong')

        assert result == {'ok': False, 'error': 'Wrong password'}
        assert 'token' not in result

    def test_login_with_unknown_email_fails(self, db):
        result = UserService.login('ghost@eats.com', 'password123')

        assert result == {'ok': False, 'error': 'User not found.'}

    def test_login_reports_generic_error_when_hashing_fails(self, client_user):
        with patch.object(User, 'check_password', side_effect=PasswordHashingError('boom')):
            result = UserService.login('client@eats.com', 'password123')

        assert result == {'ok': False, 'error': "Can't log user in."}


@pytest.mark.django_db
class TestFindById:

    def test_find_existing_user(self, client_user):
        result = UserService.find_by_id(client_user.id)

        assert result['ok'] is True
        assert result['user'] == client_user

    def test_find_missing_user(self, db):
        assert UserService.find_by_id(999999) == {'ok': False, 'error': 'User Not Found'}


@pytest.mark.django_db
class TestEditProfile:
    """Test profile edits"""

    def test_email_change_resets_verification_with_new_code(self, client_user):
        UserService.verify_email(Verification.objects.create(user=client_user).code)
        client_user.refresh_from_db()
        assert client_user.verified is True

        UserService.edit_profile(client_user.id, email='first@eats.com')
        first_code = Verification.objects.get(user=client_user).code

        result = UserService.edit_profile(client_user.id, email='second@eats.com')

        assert result['ok'] is True
        client_user.refresh_from_db()
        assert client_user.email == 'second@eats.com'
        assert client_user.verified is False
        verifications = Verification.objects.filter(user=client_user)
        assert verifications.count() == 1
        assert verifications.get().code != first_code

    def test_email_change_mails_new_code(self, client_user):
        UserService.edit_profile(client_user.id, email='changed@eats.com')

        code = Verification.objects.get(user=client_user).code
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ['changed@eats.com']
        assert code in mail.outbox[0].alternatives[0][0]

    def test_password_change_is_hashed_and_usable_for_login(self, client_user):
        result = UserService.edit_profile(client_user.id, password='brand-new-pass')

        assert result['ok'] is True
        client_user.refresh_from_db()
        assert client_user.password != 'brand-new-pass'
        assert UserService.login('client@eats.com', 'brand-new-pass')['ok'] is True
        assert UserService.login('client@eats.com', 'password123')['error'] == 'Wrong password'

    def test_password_only_change_keeps_verification_state(self, client_user):
        client_user.verified = True
        client_user.save()

        UserService.edit_profile(client_user.id, password='brand-new-pass')

        client_user.refresh_from_db()
        assert client_user.verified is True
        assert len(mail.outbox) == 0

    def test_edit_missing_user_fails(self, db):
        result = UserService.edit_profile(999999, email='x@eats.com')

        assert result == {'ok': False, 'error': 'Could not update profile'}

    def test_email_taken_by_another_user_fails(self, client_user, owner_user):
        result = UserService.edit_profile(client_user.id, email=owner_user.email)

        assert result == {'ok': False, 'error': 'Could not update profile'}
        client_user.refresh_from_db()
        assert client_user.email == 'client@eats.com'


@pytest.mark.django_db
class TestVerifyEmail:
    """Test email verification"""

    def test_unknown_code_fails(self, db):
        result = UserService.verify_email('does-not-exist')

        assert result == {'ok': False, 'error': 'Verification not found.'}

    def test_valid_code_verifies_user_once(self, client_user):
        code = Verification.objects.create(user=client_user).code

        first = UserService.verify_email(code)
        second = UserService.verify_email(code)

        assert first['ok'] is True
        client_user.refresh_from_db()
        assert client_user.verified is True
        assert second == {'ok': False, 'error': 'Verification not found.'}
        assert not Verification.objects.filter(user=client_user).exists()


@pytest.mark.django_db
class TestPasswordHashing:
    """Test rehash-on-save behaviour of the User model"""

    def test_saving_loaded_user_does_not_rehash(self, client_user):
        stored = User.objects.get(pk=client_user.pk)
        original_hash = stored.password

        stored.save()

        stored.refresh_from_db()
        assert stored.password == original_hash
        assert stored.check_password('password123')

    def test_user_without_password_gets_unusable_password(self, db):
        user = User.objects.create_user(email='nopass@eats.com')

        assert user.has_usable_password() is False

    def test_hasher_failure_raises_password_hashing_error(self, db):
        with patch.object(User, 'set_password', side_effect=ValueError('hasher broken')):
            with pytest.raises(PasswordHashingError):
                User.objects.create_user(email='broken@eats.com', password='secret123')

    @pytest.mark.parametrize('raw_password', ['!Secret123', 'md5$plain$text', 'pbkdf2_sha256$1$salt$hash'])
    def test_password_that_looks_encoded_is_still_hashed(self, raw_password):
        result = UserService.create_account('lookalike@eats.com', raw_password, User.Role.CLIENT)

        assert result['ok'] is True
        user = User.objects.get(email='lookalike@eats.com')
        assert user.password != raw_password
        assert user.check_password(raw_password)
        assert 'token' in UserService.login('lookalike@eats.com', raw_password)

    def test_profile_password_with_hasher_prefix_is_hashed(self, client_user):
        UserService.edit_profile(client_user.id, password='md5$plain$text')

        client_user.refresh_from_db()
        assert client_user.password != 'md5$plain$text'
        assert client_user.check_password('md5$plain$text')

    def test_assigning_password_attribute_directly_is_not_rehashed(self, client_user):
        client_user.password = 'pbkdf2_sha256$1$salt$hash'
        client_user.save()

        client_user.refresh_from_db()
        assert client_user.password == 'pbkdf2_sha256$1$salt$hash'

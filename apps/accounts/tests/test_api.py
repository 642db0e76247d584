import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, UserRole


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('users:register')
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'display_name': 'New User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'tokens' in response.data
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_first_account_becomes_owner(self, api_client):
        """The first registered account owns the farm."""
        url = reverse('users:register')
        data = {
            'email': 'first@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['role'] == UserRole.OWNER

    def test_later_accounts_are_workers(self, api_client, owner_user):
        """Accounts registered after the owner start as workers."""
        url = reverse('users:register')
        data = {
            'email': 'second@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'language': 'tl',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['role'] == UserRole.WORKER
        assert response.data['user']['language'] == 'tl'

    def test_register_duplicate_email(self, api_client, owner_user):
        """Cannot register with existing email."""
        url = reverse('users:register')
        data = {
            'email': owner_user.email,
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('users:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'].startswith('password_confirm:')

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('users:register')
        data = {
            'email': 'weak@example.com',
            'password': '123',
            'password_confirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, owner_user):
        """Login returns tokens for valid credentials."""
        url = reverse('users:login')
        response = api_client.post(url, {
            'email': owner_user.email,
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        owner_user.refresh_from_db()
        assert owner_user.last_login is not None

    def test_login_wrong_password(self, api_client, owner_user):
        """Wrong password is rejected with 401."""
        url = reverse('users:login')
        response = api_client.post(url, {
            'email': owner_user.email,
            'password': 'WrongPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid email or password'

    def test_login_inactive_account(self, api_client, user_inactive):
        """Deactivated accounts cannot log in."""
        url = reverse('users:login')
        response = api_client.post(url, {
            'email': user_inactive.email,
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_missing_email(self, api_client):
        """Missing email is a validation error."""
        url = reverse('users:login')
        response = api_client.post(url, {'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'].startswith('email:')


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestProfile:
    """Tests for /api/auth/user/ endpoints"""

    def test_get_current_user(self, worker_client, worker_user):
        """Current user profile is returned."""
        url = reverse('users:current-user')
        response = worker_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == worker_user.email
        assert response.data['role'] == UserRole.WORKER

    def test_get_current_user_unauthenticated(self, api_client):
        """Anonymous requests get 401."""
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_update_language(self, worker_client, worker_user):
        """Users can switch their language."""
        url = reverse('users:update-profile')
        response = worker_client.patch(url, {'language': 'tl'})

        assert response.status_code == status.HTTP_200_OK
        worker_user.refresh_from_db()
        assert worker_user.language == 'tl'

    def test_cannot_change_own_role(self, worker_client, worker_user):
        """Role is read-only on the profile endpoint."""
        url = reverse('users:update-profile')
        worker_client.patch(url, {'role': UserRole.OWNER})

        worker_user.refresh_from_db()
        assert worker_user.role == UserRole.WORKER


# =============================================================================
# Role Management Tests
# =============================================================================

@pytest.mark.django_db
class TestRoleManagement:
    """Tests for POST /api/auth/users/{id}/role/"""

    def test_owner_promotes_worker(self, owner_client, worker_user):
        """Owners can promote workers."""
        url = reverse('users:change-role', kwargs={'pk': worker_user.id})
        response = owner_client.post(url, {'role': UserRole.OWNER})

        assert response.status_code == status.HTTP_200_OK
        worker_user.refresh_from_db()
        assert worker_user.role == UserRole.OWNER

    def test_worker_cannot_change_roles(self, worker_client, owner_user):
        """Workers get 403."""
        url = reverse('users:change-role', kwargs={'pk': owner_user.id})
        response = worker_client.post(url, {'role': UserRole.WORKER})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_last_owner_cannot_be_demoted(self, owner_client, owner_user):
        """The farm always keeps an owner."""
        url = reverse('users:change-role', kwargs={'pk': owner_user.id})
        response = owner_client.post(url, {'role': UserRole.WORKER})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        owner_user.refresh_from_db()
        assert owner_user.role == UserRole.OWNER

    def test_user_list_owner_only(self, owner_client, worker_client):
        """Only owners list staff accounts."""
        url = reverse('users:user-list')

        assert owner_client.get(url).status_code == status.HTTP_200_OK
        assert worker_client.get(url).status_code == status.HTTP_403_FORBIDDEN

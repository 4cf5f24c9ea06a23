from __future__ import annotations

import threading

import pytest

from app.models import UserRecord
from app.repositories import UserRepository
from app.services import (
    ConflictError,
    InvalidIdentifierError,
    NotFoundError,
    UserService,
    ValidationError,
)


def test_create_returns_public_projection(user_service):
    user = user_service.create('alice', 'A@X.com', 'p')
    assert user == {
        'id': 1,
        'username': 'alice',
        'email': 'a@x.com',
        'role': 'user',
        'createdAt': '2024-01-01T00:00:00.000Z',
    }


def test_ids_strictly_increase(user_service):
    ids = [user_service.create(f'user{i}', f'user{i}@x.com', 'p')['id'] for i in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5

    user_service.delete(ids[-1])
    assert user_service.create('late', 'late@x.com', 'p')['id'] > ids[-1]


def test_create_conflict_is_case_insensitive(user_service):
    user_service.create('alice', 'alice@x.com', 'p')
    with pytest.raises(ConflictError):
        user_service.create('Alice', 'other@x.com', 'p')
    with pytest.raises(ConflictError):
        user_service.create('other', 'ALICE@x.com', 'p')
    assert user_service.count() == 1


@pytest.mark.parametrize('username, email, password', [
    (None, 'a@x.com', 'p'),
    ('alice', '', 'p'),
    ('alice', 'a@x.com', None),
    ('alice', 'a@x.com', '   '),
    ('alice', ['a@x.com'], 'p'),
])
def test_create_validation(user_service, username, email, password):
    with pytest.raises(ValidationError) as excinfo:
        user_service.create(username, email, password)
    assert excinfo.value.details['required'] == ['username', 'email', 'password']


def test_create_rejects_non_string_role(user_service):
    with pytest.raises(ValidationError):
        user_service.create('alice', 'a@x.com', 'p', role=5)


def test_password_is_hashed_not_stored(user_service):
    user = user_service.create('alice', 'a@x.com', 'hunter2')
    assert user_service.verify_password(user['id'], 'hunter2') is True
    assert user_service.verify_password(user['id'], 'wrong') is False


def test_password_byte_limit(user_service):
    with pytest.raises(ValidationError):
        user_service.create('alice', 'a@x.com', 'x' * 73)
    assert user_service.count() == 0

    user = user_service.create('alice', 'a@x.com', 'x' * 72)
    with pytest.raises(ValidationError):
        user_service.update(user['id'], {'password': 'ü' * 37})
    assert user_service.verify_password(user['id'], 'x' * 72) is True


def test_get_by_id_accepts_numeric_strings(user_service):
    user = user_service.create('alice', 'a@x.com', 'p')
    assert user_service.get_by_id(str(user['id'])) == user
    assert user_service.get_by_id(f" {user['id']} ") == user


@pytest.mark.parametrize('raw_id', ['abc', '1.5', '', '1e3', None, True])
def test_invalid_identifiers(user_service, raw_id):
    with pytest.raises(InvalidIdentifierError):
        user_service.get_by_id(raw_id)
    with pytest.raises(InvalidIdentifierError):
        user_service.update(raw_id, {})
    with pytest.raises(InvalidIdentifierError):
        user_service.delete(raw_id)


def test_missing_user_raises_not_found(user_service):
    with pytest.raises(NotFoundError) as excinfo:
        user_service.get_by_id(999)
    assert excinfo.value.user_id == 999
    with pytest.raises(NotFoundError):
        user_service.update(999, {'role': 'admin'})
    with pytest.raises(NotFoundError):
        user_service.delete(999)


def test_update_merges_and_stamps(user_service):
    user = user_service.create('alice', 'a@x.com', 'p')
    updated = user_service.update(user['id'], {
        'role': 'admin',
        'id': 42,
        'createdAt': 'yesterday',
        'favourite_colour': 'blue',
    })
    assert updated['id'] == user['id']
    assert updated['username'] == 'alice'
    assert updated['email'] == 'a@x.com'
    assert updated['createdAt'] == user['createdAt']
    assert updated['role'] == 'admin'
    assert updated['updatedAt'] == '2024-01-01T00:00:01.000Z'
    assert 'favourite_colour' not in updated


def test_update_rehashes_password(user_service):
    user = user_service.create('alice', 'a@x.com', 'old')
    user_service.update(user['id'], {'password': 'new'})
    assert user_service.verify_password(user['id'], 'new') is True
    assert user_service.verify_password(user['id'], 'old') is False


def test_update_rejects_bad_body(user_service):
    user = user_service.create('alice', 'a@x.com', 'p')
    with pytest.raises(ValidationError):
        user_service.update(user['id'], ['role'])
    with pytest.raises(ValidationError):
        user_service.update(user['id'], {'email': 123})


def test_update_keeps_duplicate_username(user_service):
    user_service.create('alice', 'a@x.com', 'p')
    bob = user_service.create('bob', 'b@x.com', 'p')
    assert user_service.update(bob['id'], {'username': 'ALICE'})['username'] == 'ALICE'


def test_delete_returns_id_and_username(user_service):
    user = user_service.create('alice', 'a@x.com', 'p')
    assert user_service.delete(user['id']) == {'id': user['id'], 'username': 'alice'}
    assert user_service.list_all() == []
    with pytest.raises(NotFoundError):
        user_service.get_by_id(user['id'])


def test_seeded_records_reserve_their_ids():
    seed = UserRecord(id=1, username='admin', email='admin@company.com', role='admin')
    service = UserService(UserRepository([seed]), bcrypt_rounds=4)
    assert service.create('alice', 'a@x.com', 'p')['id'] == 2
    with pytest.raises(ConflictError):
        service.create('ADMIN', 'new@x.com', 'p')


def test_concurrent_creates_keep_usernames_unique():
    service = UserService(UserRepository(), bcrypt_rounds=4)
    results = []
    barrier = threading.Barrier(8)

    def register(index):
        barrier.wait()
        try:
            service.create('racer', f'racer{index}@x.com', 'p')
            results.append('created')
        except ConflictError:
            results.append('conflict')

    threads = [threading.Thread(target=register, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count('created') == 1
    assert results.count('conflict') == 7
    assert service.count() == 1

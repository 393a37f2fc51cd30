"""
Unit tests for BranchRepository, CustomerRepository and UserRepository
"""
from sales_api.domain.branch import Branch
from sales_api.domain.customer import Customer
from sales_api.domain.user import User, UserRole


class TestBranchRepository:

    def test_get_paged_by_name(self, db_session, branch_repository):
        for name in ["Norte", "Sur", "Noroeste"]:
            branch_repository.create(Branch(name=name))
        db_session.commit()

        branches, total = branch_repository.get_paged(1, 10, name="nor")

        assert total == 2
        assert [b.name for b in branches] == ["Noroeste", "Norte"]

    def test_update_and_delete(self, db_session, branch_repository, branch):
        branch.update_info("Centro Nuevo", False)
        branch_repository.update(branch)
        db_session.commit()

        assert branch_repository.get_by_id(branch.id).name == "Centro Nuevo"

        assert branch_repository.delete(branch.id) is True
        db_session.commit()
        assert branch_repository.get_by_id(branch.id) is None


class TestCustomerRepository:

    def test_get_by_email_ignores_case(self, customer_repository, customer):
        found = customer_repository.get_by_email("ANA.TORRES@mail.com")

        assert found.id == customer.id

    def test_get_by_email_is_not_a_pattern(self, customer_repository, customer):
        assert customer_repository.get_by_email("%@mail.com") is None

    def test_get_paged_by_email(self, db_session, customer_repository, customer):
        customer_repository.create(Customer(name="Bruno", email="bruno@correo.com"))
        db_session.commit()

        customers, total = customer_repository.get_paged(1, 10, email="correo")

        assert total == 1
        assert customers[0].name == "Bruno"


class TestUserRepository:

    def test_create_and_get(self, db_session, user_repository):
        user = user_repository.create(
            User(username="maria", email="maria@mail.com", password="hash", role=UserRole.MANAGER)
        )
        db_session.commit()

        stored = user_repository.get_by_id(user.id)
        assert stored.username == "maria"
        assert stored.role == UserRole.MANAGER
        assert stored.password == "hash"
        assert user_repository.get_by_email("Maria@Mail.com").id == user.id

    def test_delete(self, db_session, user_repository):
        user = user_repository.create(User(username="maria", email="maria@mail.com", password="hash"))
        db_session.commit()

        assert user_repository.delete(user.id) is True
        db_session.commit()
        assert user_repository.get_by_id(user.id) is None

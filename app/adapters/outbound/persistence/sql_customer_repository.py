"""SQL-backed customer repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.ports.customer_repository import CustomerRepository
from app.domain.entities.customer import Customer, CustomerVariable
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import CustomerModel, CustomerVariableModel


class SqlCustomerRepository(CustomerRepository):
    """SQLAlchemy implementation of customer repository."""

    def _variable_model_to_entity(self, model: CustomerVariableModel) -> CustomerVariable:
        return CustomerVariable(
            id=model.id,
            customer_id=model.customer_id,
            key=model.key,
            value=model.value or "",
        )

    def _model_to_entity(
        self, model: CustomerModel, variables: list[CustomerVariableModel]
    ) -> Customer:
        """
        Convert CustomerModel and its variable rows to a Customer entity.

        Args:
            model: Customer row
            variables: Variable rows belonging to the customer

        Returns:
            Customer entity
        """
        return Customer(
            customer_id=model.customer_id,
            name=model.name,
            phone_number=model.phone_number,
            variables=[self._variable_model_to_entity(v) for v in variables],
        )

    async def save(self, customer: Customer) -> None:
        """
        Save a customer (upsert by customer_id) and replace its variables.

        The customer row upsert, the removal of the previous variable rows and
        the insertion of the current ones are committed in one transaction.

        Args:
            customer: Customer entity to save
        """
        db: Session = get_db_session()
        try:
            now = datetime.now(timezone.utc)
            model = (
                db.query(CustomerModel)
                .filter(CustomerModel.customer_id == customer.customer_id)
                .first()
            )

            if model:
                model.name = customer.name
                model.phone_number = customer.phone_number
                model.updated_at = now
            else:
                db.add(
                    CustomerModel(
                        customer_id=customer.customer_id,
                        name=customer.name,
                        phone_number=customer.phone_number,
                        created_at=now,
                        updated_at=now,
                    )
                )
            # Customer row must exist before variable rows reference it
            db.flush()

            db.query(CustomerVariableModel).filter(
                CustomerVariableModel.customer_id == customer.customer_id
            ).delete(synchronize_session=False)
            db.add_all(
                [
                    CustomerVariableModel(
                        id=variable.id,
                        customer_id=customer.customer_id,
                        key=variable.key,
                        value=variable.value,
                        created_at=now,
                        updated_at=now,
                    )
                    for variable in customer.list_variables()
                ]
            )

            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while saving customer {customer.customer_id}: {str(e)}"
            )
            raise
        finally:
            db.close()

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find a customer by identifier.

        Args:
            customer_id: Customer identifier

        Returns:
            Customer entity with its variables, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = (
                db.query(CustomerModel).filter(CustomerModel.customer_id == customer_id).first()
            )
            if model is None:
                return None

            variables = (
                db.query(CustomerVariableModel)
                .filter(CustomerVariableModel.customer_id == customer_id)
                .all()
            )
            return self._model_to_entity(model, variables)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting customer {customer_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def find_all(self) -> list[Customer]:
        """
        List all customers.

        Returns:
            All customers with their variables
        """
        db: Session = get_db_session()
        try:
            models = db.query(CustomerModel).all()

            variables_by_customer: dict[str, list[CustomerVariableModel]] = {}
            for variable in db.query(CustomerVariableModel).all():
                variables_by_customer.setdefault(variable.customer_id, []).append(variable)

            return [
                self._model_to_entity(model, variables_by_customer.get(model.customer_id, []))
                for model in models
            ]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing customers: {str(e)}")
            raise
        finally:
            db.close()

    async def delete(self, customer_id: str) -> None:
        """
        Delete a customer and its variables.

        Variable rows cascade at the schema level; they are also removed
        explicitly so engines without foreign key enforcement behave the same.

        Args:
            customer_id: Customer identifier
        """
        db: Session = get_db_session()
        try:
            db.query(CustomerVariableModel).filter(
                CustomerVariableModel.customer_id == customer_id
            ).delete(synchronize_session=False)
            db.query(CustomerModel).filter(CustomerModel.customer_id == customer_id).delete(
                synchronize_session=False
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting customer {customer_id}: {str(e)}")
            raise
        finally:
            db.close()

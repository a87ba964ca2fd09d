"""SQL-backed call repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.ports.call_repository import CallRepository
from app.domain.entities.call import Call, CallStatus
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import CallModel


def _ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite returns naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _status_from_db(value: str) -> CallStatus:
    try:
        return CallStatus(value)
    except ValueError:
        raise ValueError(f"Unknown call status: {value}") from None


class SqlCallRepository(CallRepository):
    """SQLAlchemy implementation of call repository."""

    def _model_to_entity(self, model: CallModel) -> Call:
        """
        Convert CallModel to Call entity.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Call entity

        Raises:
            ValueError: If the stored status is not a known CallStatus
        """
        return Call(
            call_id=model.call_id,
            customer_id=model.customer_id,
            status=_status_from_db(model.status),
            requested_at=_ensure_utc(model.requested_at),
            started_at=_ensure_utc(model.started_at),
            ended_at=_ensure_utc(model.ended_at),
            duration_sec=model.duration_sec,
        )

    def _entity_to_model(self, call: Call, model: Optional[CallModel] = None) -> CallModel:
        """
        Convert Call entity to CallModel (for upsert).

        Args:
            call: Call entity
            model: Existing model instance (for update) or None (for insert)

        Returns:
            CallModel instance
        """
        now = datetime.now(timezone.utc)

        if model:
            model.status = call.status.value
            model.started_at = call.started_at
            model.ended_at = call.ended_at
            model.duration_sec = call.duration_sec
            model.updated_at = now
            return model

        return CallModel(
            call_id=call.call_id,
            customer_id=call.customer_id,
            status=call.status.value,
            requested_at=call.requested_at,
            started_at=call.started_at,
            ended_at=call.ended_at,
            duration_sec=call.duration_sec,
            created_at=now,
            updated_at=now,
        )

    async def save(self, call: Call) -> None:
        """
        Save a call (upsert by call_id).

        Args:
            call: Call entity to save
        """
        db: Session = get_db_session()
        try:
            model = db.query(CallModel).filter(CallModel.call_id == call.call_id).first()

            if model:
                self._entity_to_model(call, model)
            else:
                db.add(self._entity_to_model(call))

            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving call {call.call_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def find_by_id(self, call_id: str) -> Optional[Call]:
        """
        Find a call by identifier.

        Args:
            call_id: Call identifier

        Returns:
            Call entity, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.query(CallModel).filter(CallModel.call_id == call_id).first()
            if model is None:
                return None
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting call {call_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def find_all_by_customer_id(self, customer_id: str) -> list[Call]:
        """
        List all calls for a customer.

        Args:
            customer_id: Customer identifier

        Returns:
            Calls of the customer (empty list if none)
        """
        db: Session = get_db_session()
        try:
            models = db.query(CallModel).filter(CallModel.customer_id == customer_id).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(
                f"Database error while listing calls for customer {customer_id}: {str(e)}"
            )
            raise
        finally:
            db.close()

    async def find_all(self) -> list[Call]:
        """
        List all calls.

        Returns:
            All calls
        """
        db: Session = get_db_session()
        try:
            models = db.query(CallModel).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing calls: {str(e)}")
            raise
        finally:
            db.close()

    async def delete(self, call_id: str) -> None:
        """
        Delete a call.

        Args:
            call_id: Call identifier
        """
        db: Session = get_db_session()
        try:
            db.query(CallModel).filter(CallModel.call_id == call_id).delete(
                synchronize_session=False
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting call {call_id}: {str(e)}")
            raise
        finally:
            db.close()

from sqlalchemy import Column, String, Integer, Float, Text, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime

from database import Base
from utils.uuid_helper import generate_uuid


class User(Base):
    """
    Admin or deliveryman account.

    Roles: admin, deliveryman
    Status: active, inactive (users are deactivated, never deleted)
    """
    __tablename__ = 'users'

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False)
    cpf = Column(String(11), nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False)
    status = Column(String, nullable=False, default='active')
    email = Column(String)
    phone = Column(String)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    orders = relationship("Order", back_populates="deliveryman")

    __table_args__ = (
        CheckConstraint("role IN ('admin', 'deliveryman')", name='ck_users_role'),
        CheckConstraint("status IN ('active', 'inactive')", name='ck_users_status'),
        Index('idx_users_role_status', 'role', 'status'),
    )


class Recipient(Base):
    __tablename__ = 'recipients'

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False)
    street = Column(String, nullable=False)
    number = Column(String, nullable=False)
    neighborhood = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    zip_code = Column(String, nullable=False)
    phone = Column(String)
    email = Column(String)
    latitude = Column(Float)
    longitude = Column(Float)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    orders = relationship("Order", back_populates="recipient")


class Order(Base):
    """
    A delivery and its lifecycle.

    Order States:
    - pending: Created by an admin, no deliveryman
    - picked_up: Held by the deliveryman in deliveryman_id
    - delivered: Confirmed with at least one photo in order_attachments
    - returned: Sent back; deliveryman_id keeps whoever had it
    """
    __tablename__ = 'orders'

    id = Column(String, primary_key=True, default=generate_uuid)
    recipient_id = Column(String, ForeignKey('recipients.id', ondelete='SET NULL'))
    deliveryman_id = Column(String, ForeignKey('users.id'))
    status = Column(String, nullable=False, default='pending')
    street = Column(String, nullable=False)
    number = Column(String, nullable=False)
    neighborhood = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    zip_code = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    recipient = relationship("Recipient", back_populates="orders")
    deliveryman = relationship("User", back_populates="orders")
    attachments = relationship(
        "OrderAttachment",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderAttachment.position",
    )
    notifications = relationship("Notification", back_populates="order", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'picked_up', 'delivered', 'returned')",
            name='ck_orders_status',
        ),
        CheckConstraint(
            "status != 'pending' OR deliveryman_id IS NULL",
            name='ck_orders_pending_unassigned',
        ),
        Index('idx_orders_status', 'status'),
        Index('idx_orders_deliveryman', 'deliveryman_id'),
        Index('idx_orders_neighborhood', 'neighborhood'),
    )


class OrderAttachment(Base):
    """Proof-of-delivery photo reference; ``position`` keeps upload order."""
    __tablename__ = 'order_attachments'

    id = Column(String, primary_key=True, default=generate_uuid)
    order_id = Column(String, ForeignKey('orders.id', ondelete='CASCADE'), nullable=False)
    attachment_id = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)

    order = relationship("Order", back_populates="attachments")

    __table_args__ = (
        Index('idx_order_attachments_order', 'order_id'),
    )


class Notification(Base):
    __tablename__ = 'notifications'

    id = Column(String, primary_key=True, default=generate_uuid)
    order_id = Column(String, ForeignKey('orders.id', ondelete='CASCADE'), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String, nullable=False, default='email')
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    order = relationship("Order", back_populates="notifications")

    __table_args__ = (
        Index('idx_notifications_order', 'order_id'),
    )

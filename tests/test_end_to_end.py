"""
Сквозной сценарий: регистрация, бронирование, подтверждение,
завершение и отзыв.
"""

from conftest import BLOCK_HEIGHT, LOOM, OWNER, RENTER

from equipment_sharing.shared_kernel import BookingStatus

COMMENT = (
    "Excellent loom, well-maintained and perfect for my project. "
    "The studio space was also very comfortable."
)


def test_full_rental_cycle(marketplace):
    """Каждый шаг возвращает первый последовательный id своей сущности."""
    # Подготовка - владелец регистрирует станок
    equipment_id = marketplace.registry.register(
        OWNER, **{**LOOM, "availability": "Weekdays"}
    )

    # Действие
    booking_id = marketplace.bookings.create(
        RENTER,
        equipment_id,
        BLOCK_HEIGHT + 100,
        BLOCK_HEIGHT + 108,
        "Need to weave a custom blanket for an exhibition",
    )
    confirmed = marketplace.bookings.confirm(OWNER, booking_id)
    completed = marketplace.bookings.complete(OWNER, booking_id)
    review_id = marketplace.reviews.submit(RENTER, equipment_id, booking_id, 5, COMMENT)

    # Проверка
    assert (equipment_id, booking_id, confirmed, completed, review_id) == (1, 1, 1, 1, 1)

    equipment = marketplace.registry.get(1)
    assert equipment.availability == "Weekdays"
    assert equipment.hourly_rate == 500

    booking = marketplace.bookings.get(1)
    assert booking.status == BookingStatus.COMPLETED
    assert booking.total_cost == 500 * 8 // 3600

    review = marketplace.reviews.get(1)
    assert review.rating == 5
    assert review.reviewer == RENTER
    assert review.comments == COMMENT


def test_instances_are_isolated(marketplace, settings, clock):
    """Два приложения не делят счетчики и хранилища."""
    from equipment_sharing import bootstrap_app

    marketplace.registry.register(OWNER, **LOOM)
    other = bootstrap_app(settings=settings, clock=clock, configure_logs=False)

    assert other.registry.get(1) is None
    assert other.registry.register(OWNER, **LOOM) == 1

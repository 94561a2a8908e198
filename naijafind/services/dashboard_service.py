"""
Supplier dashboard - everything the supplier home screen shows in one call.
"""

from datetime import datetime
from decimal import Decimal

from ..models import Order, PaymentStatus, Product, Review, Supplier

RECENT_COUNT = 5


def supplier_dashboard(supplier: Supplier) -> dict:
    orders = Order.query.filter_by(supplier_id=supplier.id).order_by(
        Order.created_at.desc(), Order.id.desc()
    ).all()
    reviews = supplier.reviews.order_by(Review.created_at.desc(), Review.id.desc()).all()
    total_products = Product.query.filter_by(supplier_id=supplier.id).count()

    average_rating = 0
    if reviews:
        average_rating = round(sum(r.rating for r in reviews) / len(reviews), 1)

    now = datetime.utcnow()
    monthly_revenue = sum(
        (o.total_amount for o in orders
         if o.payment_status == PaymentStatus.PAID
         and o.created_at.year == now.year and o.created_at.month == now.month),
        Decimal('0')
    )

    order_dicts = [o.to_dict() for o in orders]
    review_dicts = [r.to_dict() for r in reviews]

    return {
        'profile': supplier.to_dict(),
        'stats': {
            'totalOrders': len(orders),
            'totalProducts': total_products,
            'totalReviews': len(reviews),
            'averageRating': average_rating,
            'monthlyRevenue': float(monthly_revenue),
        },
        'orders': order_dicts,
        'reviews': review_dicts,
        'recentOrders': order_dicts[:RECENT_COUNT],
        'recentReviews': review_dicts[:RECENT_COUNT],
    }

import argparse

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from urbansprout.config import get_settings
from urbansprout.models import Product


def main():
    parser = argparse.ArgumentParser(description="Add a store product to UrbanSprout")
    parser.add_argument("--name", required=True, help="Product name")
    parser.add_argument("--category", required=True, help="Product category (container, tool, seeds, etc.)")
    parser.add_argument("--description", help="Short product description")
    parser.add_argument("--image", help="Image URL")
    parser.add_argument("--price", type=float, default=0.0, help="Price in rupees")
    parser.add_argument(
        "--recommend", action="store_true",
        help="Let the chatbot suggest this product alongside plant recommendations",
    )

    args = parser.parse_args()

    settings = get_settings()
    engine = create_engine(settings.database_url)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        existing = session.query(Product).filter(Product.name == args.name).first()
        if existing:
            print(f"Product '{args.name}' already exists (id={existing.id}).")
            return

        product = Product(
            name=args.name,
            category=args.category,
            description=args.description,
            image=args.image,
            price=args.price,
            chatbot_recommended=args.recommend,
            is_active=True,
        )

        session.add(product)
        session.commit()

        print(f"\n✅ Product Created Successfully!")
        print(f"--------------------------------")
        print(f"Name:        {product.name}")
        print(f"Category:    {product.category}")
        print(f"Price:       ₹{product.price:.2f}")
        print(f"Recommended: {'yes' if product.chatbot_recommended else 'no'}")
        print(f"--------------------------------")

    except Exception as e:
        print(f"Error: {e}")
        session.rollback()
    finally:
        session.close()


if __name__ == "__main__":
    main()

"""
Seed data script for the UrbanSprout database.
Populates quiz suggestion sets, quiz plants and chatbot-recommended store products.
"""
from typing import Optional

from sqlalchemy.orm import Session

from urbansprout.database import SessionLocal
from urbansprout.models import Plant, PlantSuggestion, Product, build_combination_key

UNSPLASH = "https://images.unsplash.com/photo-{}?w=300&h=200&fit=crop&q=80"
TOMATO_IMG = UNSPLASH.format("1592924357228-91a4daadcfea")
BERRY_IMG = UNSPLASH.format("1464965911861-746a04b4bca6")
HERB_IMG = UNSPLASH.format("1594736797933-d0401ba2fe65")
BASIL_IMG = UNSPLASH.format("1615485290382-441e4d049cb5")
GREENS_IMG = UNSPLASH.format("1622206151226-18ca2c9ab4a1")
SPINACH_IMG = UNSPLASH.format("1576045057995-568f588f82fb")
PEPPER_IMG = UNSPLASH.format("1544816155-12df9643f363")


def entry(name, category, description, image, growing_time, sunlight, space, difficulty, price):
    return {
        "name": name,
        "category": category,
        "description": description,
        "image": image,
        "growingTime": growing_time,
        "sunlight": sunlight,
        "space": space,
        "difficulty": difficulty,
        "price": price,
    }


SUGGESTION_SETS = [
    {
        "combination": ("small", "full_sun", "beginner", "low", "food"),
        "plants": [
            entry("Cherry Tomato", "Fruits", "Compact tomato that fruits heavily in a single pot.",
                  TOMATO_IMG, "60-75 days", "Full Sun", "Small", "Easy", "₹30-50"),
            entry("Strawberry", "Fruits", "Sweet berries from hanging baskets or window boxes.",
                  BERRY_IMG, "60-80 days", "Full Sun", "Small", "Easy", "₹25-40"),
            entry("Sweet Basil", "Herbs", "Aromatic herb that thrives on a sunny sill.",
                  BASIL_IMG, "30-45 days", "Full Sun", "Small", "Easy", "₹20-30"),
            entry("Fresh Mint", "Herbs", "Vigorous herb for teas and garnishes; keep it potted.",
                  HERB_IMG, "20-30 days", "Full Sun", "Small", "Easy", "₹15-25"),
            entry("Bell Pepper", "Vegetables", "Colourful peppers suited to deep containers.",
                  PEPPER_IMG, "70-90 days", "Full Sun", "Small", "Easy", "₹25-40"),
            entry("Lettuce", "Vegetables", "Cut-and-come-again leaves for fresh salads.",
                  GREENS_IMG, "30-45 days", "Full Sun", "Small", "Easy", "₹15-25"),
        ],
        "message": "Perfect for small spaces! Here are beginner-friendly, low-maintenance plants "
                   "that match your growing conditions.",
    },
    {
        "combination": ("small", "partial_sun", "beginner", "low", "food"),
        "plants": [
            entry("Strawberry", "Fruits", "Berries that still crop well with a few hours of sun.",
                  BERRY_IMG, "60-80 days", "Partial Sun", "Small", "Easy", "₹25-40"),
            entry("Cherry Tomato", "Fruits", "Forgiving tomato for balconies with morning sun.",
                  TOMATO_IMG, "60-75 days", "Partial Sun", "Small", "Easy", "₹30-50"),
            entry("Cilantro", "Herbs", "Fast herb that bolts less in partial shade.",
                  HERB_IMG, "25-35 days", "Partial Sun", "Small", "Easy", "₹15-25"),
            entry("Parsley", "Herbs", "Hardy leafy herb for steady harvests.",
                  HERB_IMG, "30-40 days", "Partial Sun", "Small", "Easy", "₹18-28"),
            entry("Spinach", "Vegetables", "Nutritious greens that prefer cooler, dappled light.",
                  SPINACH_IMG, "35-50 days", "Partial Sun", "Small", "Easy", "₹20-30"),
            entry("Green Onions", "Vegetables", "Regrow from scraps in a shallow pot.",
                  GREENS_IMG, "20-30 days", "Partial Sun", "Small", "Easy", "₹10-20"),
        ],
        "message": "Perfect for small spaces! Here are beginner-friendly, low-maintenance plants "
                   "that grow well in partial sunlight.",
    },
    {
        "combination": ("medium", "full_sun", "intermediate", "medium", "food"),
        "plants": [
            entry("Watermelon", "Fruits", "Sprawling vines that reward regular watering.",
                  BERRY_IMG, "80-100 days", "Full Sun", "Medium", "Medium", "₹50-80"),
            entry("Cantaloupe", "Fruits", "Fragrant melons for a trellised corner.",
                  BERRY_IMG, "75-90 days", "Full Sun", "Medium", "Medium", "₹45-75"),
            entry("Rosemary", "Herbs", "Woody perennial herb that loves heat.",
                  HERB_IMG, "60-90 days", "Full Sun", "Medium", "Medium", "₹30-45"),
            entry("Oregano", "Herbs", "Spreading Mediterranean herb for sunny beds.",
                  HERB_IMG, "40-50 days", "Full Sun", "Medium", "Medium", "₹20-30"),
            entry("Cucumber", "Vegetables", "Climbing cucumbers for salads and pickles.",
                  GREENS_IMG, "50-70 days", "Full Sun", "Medium", "Medium", "₹20-35"),
            entry("Zucchini", "Vegetables", "Productive squash; one plant feeds a household.",
                  GREENS_IMG, "45-60 days", "Full Sun", "Medium", "Medium", "₹25-40"),
        ],
        "message": "Perfect for medium spaces! Here are intermediate-level, moderate-care plants "
                   "that match your growing conditions.",
    },
    {
        "combination": ("large", "full_sun", "advanced", "high", "food"),
        "plants": [
            entry("Grapes", "Fruits", "Trained vines that need pruning and support.",
                  BERRY_IMG, "120-150 days", "Full Sun", "Large", "Hard", "₹80-120"),
            entry("Figs", "Fruits", "Large shrubs with sweet fruit in warm spots.",
                  BERRY_IMG, "100-130 days", "Full Sun", "Large", "Hard", "₹90-150"),
            entry("Lavender", "Herbs", "Fragrant shrub that needs sharp drainage.",
                  HERB_IMG, "90-120 days", "Full Sun", "Large", "Hard", "₹40-60"),
            entry("Sage", "Herbs", "Silvery perennial herb for dry beds.",
                  HERB_IMG, "50-70 days", "Full Sun", "Large", "Hard", "₹25-40"),
            entry("Pumpkin", "Vegetables", "Heavy feeders with room-hungry vines.",
                  GREENS_IMG, "90-120 days", "Full Sun", "Large", "Hard", "₹40-70"),
            entry("Corn", "Vegetables", "Plant in blocks for good pollination.",
                  GREENS_IMG, "70-90 days", "Full Sun", "Large", "Hard", "₹30-50"),
        ],
        "message": "Perfect for large spaces! Here are advanced, high-maintenance plants "
                   "that match your growing conditions.",
    },
    {
        "combination": ("small", "shade", "beginner", "low", "health"),
        "plants": [
            entry("Spider Plant", "Houseplants", "Air-purifying plant that tolerates low light.",
                  GREENS_IMG, "45-75 days", "Shade", "Small", "Easy", "₹30-50"),
            entry("Snake Plant", "Houseplants", "Nearly indestructible air purifier.",
                  GREENS_IMG, "90-120 days", "Shade", "Small", "Easy", "₹60-100"),
            entry("Mushrooms", "Vegetables", "Grow kits fruit in dark cupboards.",
                  GREENS_IMG, "14-21 days", "Shade", "Small", "Easy", "₹40-60"),
            entry("Microgreens", "Vegetables", "Nutrient-dense shoots ready in two weeks.",
                  SPINACH_IMG, "7-14 days", "Shade", "Small", "Easy", "₹15-25"),
        ],
        "message": "Perfect for small spaces! Here are beginner-friendly, low-maintenance "
                   "air-purifying plants that grow well in shade.",
    },
]

QUIZ_PLANTS = [
    dict(plant_name="Cherry Tomato", image_url=TOMATO_IMG,
         description="Compact, prolific tomato for containers.",
         benefits="Rich in vitamin C and lycopene", days_to_grow=70, maintenance="low",
         sunlight="full_sun", space="small", experience="beginner", time="low",
         category="vegetables", price="₹30-50", difficulty="Easy", growing_time="60-75 days"),
    dict(plant_name="Sweet Basil", image_url=BASIL_IMG,
         description="Aromatic culinary herb for sunny windowsills.",
         benefits="Fresh flavour for cooking; repels some pests", days_to_grow=40, maintenance="low",
         sunlight="full_sun", space="small", experience="beginner", time="low",
         category="herbs", price="₹20-30", difficulty="Easy", growing_time="30-45 days"),
    dict(plant_name="Spinach", image_url=SPINACH_IMG,
         description="Cool-season leafy green that tolerates some shade.",
         benefits="High in iron and folate", days_to_grow=45, maintenance="low",
         sunlight="partial_sun", space="small", experience="beginner", time="low",
         category="vegetables", price="₹20-30", difficulty="Easy", growing_time="35-50 days"),
    dict(plant_name="Cucumber", image_url=GREENS_IMG,
         description="Climbing vine that crops through summer.",
         benefits="Hydrating and great for salads", days_to_grow=60, maintenance="medium",
         sunlight="full_sun", space="medium", experience="intermediate", time="medium",
         category="vegetables", price="₹20-35", difficulty="Moderate", growing_time="50-70 days"),
    dict(plant_name="Strawberry", image_url=BERRY_IMG,
         description="Sweet berries for baskets and window boxes.",
         benefits="Vitamin C and antioxidants", days_to_grow=80, maintenance="medium",
         sunlight="full_sun", space="small", experience="intermediate", time="medium",
         category="fruits", price="₹25-40", difficulty="Moderate", growing_time="60-80 days"),
    dict(plant_name="Microgreens", image_url=SPINACH_IMG,
         description="Nutrient-dense shoots harvested within two weeks.",
         benefits="Concentrated vitamins; ready in days", days_to_grow=14, maintenance="low",
         sunlight="shade", space="small", experience="beginner", time="low",
         category="vegetables", price="₹15-25", difficulty="Easy", growing_time="7-14 days"),
]

STORE_PRODUCTS = [
    dict(name="Small Ceramic Pots", description="Set of 3 glazed pots, perfect for herbs.",
         category="container", image="/images/products/ceramic-pots.jpg", price=499.0,
         chatbot_recommended=True),
    dict(name="Hand Trowel", description="Stainless steel trowel for planting and repotting.",
         category="tool", image="/images/products/hand-trowel.jpg", price=299.0,
         chatbot_recommended=True),
    dict(name="Organic Potting Mix", description="Peat-free mix for containers and raised beds.",
         category="soil", image="/images/products/potting-mix.jpg", price=349.0,
         chatbot_recommended=True),
    dict(name="Vegetable Seed Starter Kit", description="Ten easy vegetables with seed trays.",
         category="seeds", image="/images/products/seed-kit.jpg", price=599.0,
         chatbot_recommended=True),
    dict(name="Watering Can", description="1.5 L can with a fine rose for seedlings.",
         category="tool", image="/images/products/watering-can.jpg", price=399.0,
         chatbot_recommended=False),
]


def seed_database(session: Optional[Session] = None) -> bool:
    """Seed the database with initial data. Returns False when already seeded."""
    owns_session = session is None
    session = session or SessionLocal()

    try:
        # Check if already seeded
        if session.query(PlantSuggestion).first():
            print("Database already seeded, skipping...")
            return False

        print("Seeding database...")

        for item in SUGGESTION_SETS:
            space, sunlight, experience, time, purpose = item["combination"]
            session.add(PlantSuggestion(
                combination_key=build_combination_key(space, sunlight, experience, time, purpose),
                space=space,
                sunlight=sunlight,
                experience=experience,
                time=time,
                purpose=purpose,
                plants=item["plants"],
                recommendation_message=item["message"],
                is_active=True,
            ))
        print(f"  Created {len(SUGGESTION_SETS)} suggestion sets")

        session.add_all(Plant(**values) for values in QUIZ_PLANTS)
        print(f"  Created {len(QUIZ_PLANTS)} quiz plants")

        session.add_all(Product(**values) for values in STORE_PRODUCTS)
        print(f"  Created {len(STORE_PRODUCTS)} store products")

        session.commit()
        print("Database seeded successfully!")
        return True
    except Exception:
        session.rollback()
        raise
    finally:
        if owns_session:
            session.close()


if __name__ == "__main__":
    seed_database()

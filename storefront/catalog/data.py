"""Hardcoded demo catalog."""

FEATURED_PRODUCTS = [
    {
        "id": "1",
        "title": "Cyberpunk Vice City 2077",
        "slug": "cyberpunk-vice-city-2077",
        "description": "Experience the neon-lit streets of Vice City in this groundbreaking open-world RPG.",
        "price": "59.99",
        "old_price": "79.99",
        "image": "https://images.unsplash.com/photo-1542751371-adc38448a05e?w=800&h=600&fit=crop",
        "badge": "NEW",
        "platform": "PC",
        "rating": 4.8,
        "sales": 1250,
        "featured": True,
        "category": "action",
        "genres": ["RPG", "Action", "Open World"],
        "release_date": "2024-11-01",
    },
    {
        "id": "2",
        "title": "Street Legends: Underworld",
        "slug": "street-legends-underworld",
        "description": "Build your criminal empire from the ground up in this intense strategy game.",
        "price": "49.99",
        "image": "https://images.unsplash.com/photo-1550745165-9bc0b252726f?w=800&h=600&fit=crop",
        "badge": "SALE",
        "platform": "PC",
        "rating": 4.6,
        "sales": 890,
        "featured": True,
        "category": "strategy",
        "genres": ["Strategy", "Simulation"],
        "release_date": "2024-10-15",
    },
    {
        "id": "3",
        "title": "Neon Racers: Miami Nights",
        "slug": "neon-racers-miami-nights",
        "description": "Race through the streets of Miami in this adrenaline-pumped arcade racer.",
        "price": "39.99",
        "image": "https://images.unsplash.com/photo-1511512578047-dfb367046420?w=800&h=600&fit=crop",
        "platform": "PC",
        "rating": 4.7,
        "sales": 2100,
        "featured": True,
        "category": "racing",
        "genres": ["Racing", "Arcade"],
        "release_date": "2024-09-20",
    },
]

PRODUCTS = FEATURED_PRODUCTS + [
    {
        "id": "4",
        "title": "Vice City Heist",
        "slug": "vice-city-heist",
        "description": "Plan and execute the perfect heist in this tactical stealth action game.",
        "price": "44.99",
        "image": "https://images.unsplash.com/photo-1538481199705-c710c4e965fc?w=800&h=600&fit=crop",
        "platform": "PC",
        "rating": 4.5,
        "sales": 750,
        "featured": True,
        "category": "action",
        "genres": ["Action", "Stealth"],
        "release_date": "2024-08-10",
    },
    {
        "id": "5",
        "title": "Urban Warriors",
        "slug": "urban-warriors",
        "description": "Fight your way through the city in this intense beat 'em up.",
        "price": "29.99",
        "image": "https://images.unsplash.com/photo-1552820728-8b83bb6b773f?w=800&h=600&fit=crop",
        "platform": "PC",
        "rating": 4.3,
        "sales": 650,
        "category": "action",
        "genres": ["Action", "Fighting"],
        "release_date": "2024-07-05",
    },
    {
        "id": "6",
        "title": "Sunset Boulevard Simulator",
        "slug": "sunset-boulevard-simulator",
        "description": "Live the high life in this immersive life simulation game.",
        "price": "34.99",
        "image": "https://images.unsplash.com/photo-1493711662062-fa541adb3fc8?w=800&h=600&fit=crop",
        "platform": "PC",
        "rating": 4.4,
        "sales": 1020,
        "category": "simulation",
        "genres": ["Simulation", "RPG"],
        "release_date": "2024-06-18",
    },
]

CATEGORIES = [
    {"name": "Action", "slug": "action", "count": 45, "image": "https://images.unsplash.com/photo-1560253023-3ec5d502959f?w=800&h=800&fit=crop"},
    {"name": "RPG", "slug": "rpg", "count": 32, "image": "https://images.unsplash.com/photo-1509198397868-475647b2a1e5?w=800&h=800&fit=crop"},
    {"name": "Racing", "slug": "racing", "count": 18, "image": "https://images.unsplash.com/photo-1547949003-9792a18a2601?w=800&h=800&fit=crop"},
    {"name": "Strategy", "slug": "strategy", "count": 27, "image": "https://images.unsplash.com/photo-1511512578047-dfb367046420?w=800&h=800&fit=crop"},
]

TESTIMONIALS = [
    {
        "text": "Best gaming marketplace I've ever used! The selection is incredible and the prices are unbeatable.",
        "author": "Alex Rodriguez",
        "role": "Pro Gamer",
        "avatar": "https://i.pravatar.cc/150?img=12",
        "rating": 5,
    },
    {
        "text": "Lightning-fast delivery and amazing customer support. These guys really know what gamers want!",
        "author": "Sarah Chen",
        "role": "Game Streamer",
        "avatar": "https://i.pravatar.cc/150?img=45",
        "rating": 5,
    },
    {
        "text": "The GTA-6 theme is absolutely fire! Makes shopping for games an experience in itself.",
        "author": "Marcus Johnson",
        "role": "Gaming Enthusiast",
        "avatar": "https://i.pravatar.cc/150?img=33",
        "rating": 5,
    },
]

FILTER_OPTIONS = {
    "categories": ["Action", "RPG", "Racing", "Strategy", "Simulation", "Sports"],
    "platforms": ["PC", "PlayStation 5", "Xbox Series X", "Nintendo Switch"],
    "genres": ["Open World", "FPS", "Stealth", "Multiplayer", "Single Player"],
}

ORDERS = [
    {
        "id": "#A8F3D92B",
        "date": "2024-10-28",
        "status": "delivered",
        "total": "109.97",
        "items": [
            {"title": "Cyberpunk Vice City 2077", "price": "59.99", "image": "https://images.unsplash.com/photo-1542751371-adc38448a05e?w=800&h=600&fit=crop"},
            {"title": "Neon Racers: Miami Nights", "price": "49.99", "image": "https://images.unsplash.com/photo-1511512578047-dfb367046420?w=800&h=600&fit=crop"},
        ],
    },
    {
        "id": "#B7E2C81A",
        "date": "2024-10-15",
        "status": "processing",
        "total": "44.99",
        "items": [
            {"title": "Vice City Heist", "price": "44.99", "image": "https://images.unsplash.com/photo-1538481199705-c710c4e965fc?w=800&h=600&fit=crop"},
        ],
    },
]

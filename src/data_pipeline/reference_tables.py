"""
Reference Tables
================

Curated, read-only travel data for major Indian cities. Every table is an
immutable mapping keyed by canonical city name; lists are tuples so the
shared data cannot be mutated by callers. Generic defaults live in
reference_data.py next to the lookup functions that apply them.

Author: India Travel Info Team
"""

from types import MappingProxyType


HOTEL_IMAGES = (
    "https://images.unsplash.com/photo-1566073771259-6a8506099945",
    "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4",
    "https://images.unsplash.com/photo-1571896349842-33c89424de2d",
)

RESTAURANT_IMAGES = (
    "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4",
    "https://images.unsplash.com/photo-1596797038530-2c107229654b",
    "https://images.unsplash.com/photo-1559339352-11d035aa65de",
)

# Cities pre-registered in the repository: (name, state, latitude, longitude)
SEED_CITIES = (
    ("Mumbai", "Maharashtra", 19.0760, 72.8777),
    ("Delhi", "Delhi", 28.7041, 77.1025),
    ("Bangalore", "Karnataka", 12.9716, 77.5946),
    ("Chennai", "Tamil Nadu", 13.0827, 80.2707),
    ("Kolkata", "West Bengal", 22.5726, 88.3639),
    ("Hyderabad", "Telangana", 17.3850, 78.4867),
    ("Pune", "Maharashtra", 18.5204, 73.8567),
    ("Ahmedabad", "Gujarat", 23.0225, 72.5714),
)

LOCAL_LANGUAGES = MappingProxyType({
    "Mumbai": "Marathi",
    "Delhi": "Hindi",
    "Bangalore": "Kannada",
    "Chennai": "Tamil",
    "Kolkata": "Bengali",
    "Hyderabad": "Telugu",
    "Pune": "Marathi",
    "Ahmedabad": "Gujarati",
    "Jaipur": "Rajasthani",
    "Kochi": "Malayalam",
    "Tirupati": "Telugu",
    "Vijayawada": "Telugu",
    "Nellore": "Telugu",
})

HISTORICAL_INFO = MappingProxyType({
    "Mumbai": "Mumbai, formerly known as Bombay, is the financial capital of India. Originally a cluster "
              "of seven islands, it was shaped by Portuguese and British colonial rule before becoming "
              "the commercial heart of modern India.",
    "Delhi": "Delhi, India's capital territory, has been continuously inhabited for over 2,500 years. It "
             "has served as the capital of various empires, including the Mughal Empire, and features "
             "numerous UNESCO World Heritage Sites.",
    "Bangalore": "Bangalore, known as India's Silicon Valley, was founded in 1537 by Kempe Gowda. It "
                 "transformed from a pensioner's paradise to India's IT capital, hosting major global "
                 "technology companies.",
    "Chennai": "Chennai, formerly Madras, was established by the British East India Company in 1640. It's "
               "known as the 'Detroit of India' for its automobile industry and is a major cultural "
               "center of South India.",
    "Kolkata": "Kolkata, the former capital of British India, is known as the 'City of Joy'. It was the "
               "center of the Bengal Renaissance and remains India's intellectual and cultural capital.",
    "Hyderabad": "Hyderabad, founded in 1591 by Muhammad Quli Qutb Shah, is famous for its rich history, "
                 "pearls, and biryani. It's now a major IT hub known as 'Cyberabad'.",
    "Pune": "Pune, once the seat of the Maratha Empire, is known for its educational institutions and IT "
            "industry. It's often called the 'Oxford of the East' and 'Queen of the Deccan'.",
    "Ahmedabad": "Ahmedabad, founded in 1411 by Sultan Ahmed Shah, is Gujarat's largest city and India's "
                 "first UNESCO World Heritage City. It's known for its textile industry and as Mahatma "
                 "Gandhi's home base.",
})

BEST_TIME_TO_VISIT = MappingProxyType({
    "Mumbai": "November to February (cool and dry, perfect for sightseeing)",
    "Delhi": "October to March (pleasant winter weather, ideal for exploring)",
    "Bangalore": "Year-round destination (pleasant climate, slight preference for Oct-Feb)",
    "Chennai": "November to February (post-monsoon, less humid)",
    "Kolkata": "October to March (comfortable weather after monsoon)",
    "Hyderabad": "October to February (cool and pleasant)",
    "Pune": "October to February (ideal weather for outdoor activities)",
    "Ahmedabad": "November to February (cooler months, festival season)",
})

CULTURAL_TIPS = MappingProxyType({
    "Mumbai": (
        "Use local trains during off-peak hours to avoid crowds",
        "Try street food at Mohammed Ali Road and Crawford Market",
        "Respect the fast-paced lifestyle - Mumbai never sleeps",
        "Remove shoes before entering religious places",
    ),
    "Delhi": (
        "Dress modestly when visiting Red Fort and Jama Masjid",
        "Negotiate prices at Chandni Chowk and Khan Market",
        "Use Delhi Metro for convenient travel",
        "Try authentic Delhi street food with caution",
    ),
    "Bangalore": (
        "English is widely spoken - communication is easy",
        "Pub culture is prominent - respect local nightlife etiquette",
        "Traffic can be heavy - plan extra travel time",
        "Weather can change quickly - carry light jacket",
    ),
})

SAFETY_RATINGS = MappingProxyType({
    "Mumbai": 4.1,
    "Delhi": 3.8,
    "Bangalore": 4.4,
    "Chennai": 4.2,
    "Kolkata": 4.0,
    "Hyderabad": 4.3,
    "Pune": 4.5,
    "Ahmedabad": 4.2,
})

CRIME_RATES = MappingProxyType({
    "Mumbai": "Moderate (petty theft, crowded areas need caution)",
    "Delhi": "Moderate to High (be cautious, especially at night)",
    "Bangalore": "Low to Moderate (generally safe, traffic incidents common)",
    "Chennai": "Low to Moderate (safe for tourists, minor theft possible)",
    "Kolkata": "Moderate (political demonstrations, minor crimes)",
    "Hyderabad": "Low (generally safe, standard precautions)",
    "Pune": "Low (very safe, minimal crime against tourists)",
    "Ahmedabad": "Low to Moderate (safe, but avoid sensitive areas)",
})

TOURIST_ATTRACTIONS = MappingProxyType({
    "Mumbai": ("Gateway of India", "Marine Drive", "Elephanta Caves", "Chhatrapati Shivaji Terminus",
               "Bollywood Studios"),
    "Delhi": ("Red Fort", "India Gate", "Qutub Minar", "Lotus Temple", "Humayun's Tomb"),
    "Bangalore": ("Lalbagh Botanical Garden", "Bangalore Palace", "Tipu Sultan's Summer Palace",
                  "ISKCON Temple", "Cubbon Park"),
    "Chennai": ("Marina Beach", "Kapaleeshwarar Temple", "Fort St. George", "Government Museum",
                "San Thome Cathedral"),
    "Kolkata": ("Victoria Memorial", "Howrah Bridge", "Dakshineswar Temple", "Indian Museum",
                "Eden Gardens"),
    "Hyderabad": ("Charminar", "Golconda Fort", "Ramoji Film City", "Salar Jung Museum",
                  "Hussain Sagar Lake"),
    "Pune": ("Shaniwar Wada", "Aga Khan Palace", "Sinhagad Fort", "Osho Ashram", "Pataleshwar Cave Temple"),
    "Ahmedabad": ("Sabarmati Ashram", "Adalaj Stepwell", "Akshardham Temple", "Kankaria Lake",
                  "Sidi Saiyyed Mosque"),
})

LOCAL_CUISINE = MappingProxyType({
    "Mumbai": ("Vada Pav", "Pav Bhaji", "Bhel Puri", "Bombay Duck", "Solkadhi"),
    "Delhi": ("Chole Bhature", "Paranthe Wali Gali", "Delhi Chaat", "Nihari", "Kulfi"),
    "Bangalore": ("Masala Dosa", "Bisi Bele Bath", "Mysore Pak", "Filter Coffee", "Rava Idli"),
    "Chennai": ("Dosa & Idli", "Chettinad Cuisine", "Fish Curry", "Sambar", "Rasam"),
    "Kolkata": ("Fish Curry Rice", "Rosogolla", "Kathi Roll", "Bengali Sweets", "Mishti Doi"),
    "Hyderabad": ("Hyderabadi Biryani", "Haleem", "Nihari", "Qubani ka Meetha", "Irani Chai"),
    "Pune": ("Misal Pav", "Puran Poli", "Bhakri", "Mastani", "Poha"),
    "Ahmedabad": ("Dhokla", "Thepla", "Gujarati Thali", "Fafda Jalebi", "Handvo"),
})

POLITICAL_INFO = MappingProxyType({
    "Mumbai": "Commercial capital of Maharashtra state. Known for active civic movements and "
              "business-friendly policies.",
    "Delhi": "National Capital Territory with unique administrative structure. Seat of Central Government.",
    "Bangalore": "Capital of Karnataka state. Major technology and aerospace hub with progressive governance.",
    "Chennai": "Capital of Tamil Nadu state. Important port city with significant political influence "
               "in South India.",
    "Kolkata": "Capital of West Bengal state. Historic political center with strong intellectual traditions.",
    "Hyderabad": "Capital of Telangana state (formed in 2014). Emerging IT and pharmaceutical hub.",
    "Pune": "Major city in Maharashtra state. Important educational and cultural center.",
    "Ahmedabad": "Largest city in Gujarat state. Commercial center with business-friendly environment.",
})

FESTIVALS = MappingProxyType({
    "Mumbai": ("Ganesh Chaturthi", "Navratri", "Diwali", "Gudi Padwa", "Mumbai Film Festival"),
    "Delhi": ("Diwali", "Holi", "Dussehra", "Red Fort Festival", "Delhi Literature Festival"),
    "Bangalore": ("Karaga Festival", "Dussehra", "Diwali", "Bangalore Literature Festival",
                  "Classical Music Season"),
    "Chennai": ("Tamil New Year", "Chennai Music Season", "Pongal", "Navaratri", "Chennai Book Fair"),
    "Kolkata": ("Durga Puja", "Kali Puja", "Poila Boishakh", "Kolkata Book Fair", "Film Festival"),
    "Hyderabad": ("Bonalu", "Bathukamma", "Eid celebrations", "Diwali", "Deccan Festival"),
    "Pune": ("Ganesh Festival", "Shivaji Jayanti", "Pune Festival", "Classical Music Festival", "Gudi Padwa"),
    "Ahmedabad": ("Navratri", "International Kite Festival", "Diwali", "Rath Yatra",
                  "Gujarat Literature Festival"),
})

# (name, rating, location, price); images are assigned in order from HOTEL_IMAGES
HOTELS = MappingProxyType({
    "Mumbai": (
        ("The Taj Mahal Palace", 4.8, "Colaba", "₹18,000"),
        ("ITC Grand Central", 4.6, "Parel", "₹12,500"),
        ("Hotel Sea Green", 4.2, "Marine Drive", "₹8,500"),
    ),
    "Delhi": (
        ("The Imperial Hotel", 4.7, "Connaught Place", "₹15,000"),
        ("Taj Palace Hotel", 4.6, "Diplomatic Enclave", "₹20,000"),
        ("Hotel Metropolis", 4.0, "Karol Bagh", "₹6,500"),
    ),
    "Bangalore": (
        ("ITC Windsor", 4.5, "Golf Course Road", "₹11,000"),
        ("The Oberoi Bangalore", 4.7, "MG Road", "₹16,000"),
        ("Hotel Ivory Tower", 4.1, "Bannerghatta Road", "₹7,200"),
    ),
    "Chennai": (
        ("ITC Grand Chola", 4.6, "Guindy", "₹13,500"),
        ("The Leela Palace", 4.8, "Adyar", "₹19,000"),
        ("Hotel Savera", 4.0, "Dr. Radhakrishnan Salai", "₹8,000"),
    ),
    "Hyderabad": (
        ("Taj Falaknuma Palace", 4.9, "Falaknuma", "₹35,000"),
        ("ITC Kohenur", 4.5, "HITEC City", "₹12,000"),
        ("Hotel Dwaraka", 4.2, "SD Road", "₹6,800"),
    ),
    "Tirupati": (
        ("Fortune Select Grand Ridge", 4.3, "Tirumala Hills", "₹9,500"),
        ("Hotel Bliss", 4.0, "Railway Station Road", "₹4,500"),
        ("Kalyan Residency", 3.8, "Car Street", "₹3,200"),
    ),
    "Vijayawada": (
        ("The Kay Hotel", 4.2, "MG Road", "₹7,500"),
        ("Hotel Manorama", 3.9, "Eluru Road", "₹4,800"),
        ("Fortune Murali Park", 4.1, "Benz Circle", "₹6,200"),
    ),
    "Nellore": (
        ("Hotel Haritha", 3.8, "Grand Trunk Road", "₹3,500"),
        ("Hotel Raju Gari Gaddi", 3.6, "Trunk Road", "₹2,800"),
        ("Sri Kanya Hotel", 3.7, "Railway Station Road", "₹3,100"),
    ),
    "Jaipur": (
        ("Taj Rambagh Palace", 4.8, "Bhawani Singh Road", "₹25,000"),
        ("The Oberoi Rajvilas", 4.9, "Goner Road", "₹32,000"),
        ("Hotel Pearl Palace", 4.0, "Hari Kishan Somani Marg", "₹5,500"),
    ),
    "Kochi": (
        ("Taj Malabar Resort", 4.6, "Willingdon Island", "₹14,000"),
        ("Le Meridien Kochi", 4.4, "Maradu", "₹11,500"),
        ("Hotel Abad Plaza", 4.1, "MG Road", "₹7,800"),
    ),
})

# (name, rating, cuisine, location, price range); images cycle through RESTAURANT_IMAGES
RESTAURANTS = MappingProxyType({
    "Mumbai": (
        ("Trishna", 4.7, "Contemporary Indian Seafood", "Fort", "₹₹₹"),
        ("Bademiya", 4.3, "Street Food & Kebabs", "Colaba Causeway", "₹"),
        ("Leopold Cafe", 4.2, "Continental & Indian", "Colaba", "₹₹"),
        ("Cafe Mondegar", 4.1, "European & Indian", "Colaba", "₹₹"),
    ),
    "Delhi": (
        ("Bukhara", 4.8, "North Indian & Mughlai", "ITC Maurya", "₹₹₹₹"),
        ("Karim's", 4.4, "Mughlai", "Jama Masjid", "₹₹"),
        ("Paranthe Wali Gali", 4.2, "Street Food", "Chandni Chowk", "₹"),
        ("Al Jawahar", 4.3, "Mughlai", "Jama Masjid", "₹₹"),
    ),
    "Bangalore": (
        ("Koshy's Restaurant", 4.3, "Continental & Indian", "St. Mark's Road", "₹₹"),
        ("MTR (Mavalli Tiffin Room)", 4.5, "South Indian", "Lalbagh Road", "₹"),
        ("Vidyarthi Bhavan", 4.4, "South Indian", "Gandhi Bazaar", "₹"),
        ("Corner House Ice Cream", 4.2, "Desserts", "Various Locations", "₹"),
    ),
    "Chennai": (
        ("Dakshin", 4.6, "South Indian Fine Dining", "ITC Park Sheraton", "₹₹₹"),
        ("Murugan Idli Shop", 4.4, "South Indian", "Multiple Locations", "₹"),
        ("Saravana Bhavan", 4.3, "Vegetarian South Indian", "KK Nagar", "₹"),
        ("Buhari Hotel", 4.2, "Biryani & Mughlai", "Anna Salai", "₹₹"),
    ),
    "Hyderabad": (
        ("Paradise Restaurant", 4.5, "Hyderabadi Biryani", "Secunderabad", "₹₹"),
        ("Bawarchi Restaurant", 4.4, "Biryani & Mughlai", "RTC X Roads", "₹₹"),
        ("Shah Ghouse", 4.3, "Haleem & Biryani", "Tolichowki", "₹₹"),
        ("Cafe Bahar", 4.2, "Hyderabadi Cuisine", "Basheer Bagh", "₹₹"),
    ),
    "Tirupati": (
        ("Hotel Minerva Grand", 4.1, "South Indian & Multi-cuisine", "Renigunta Road", "₹₹"),
        ("Sri Venkateswara Restaurant", 4.0, "Pure Vegetarian", "Car Street", "₹"),
        ("Taste of Tirumala", 3.9, "Temple Food", "Near Temple", "₹"),
        ("Annapurna Restaurant", 3.8, "South Indian Thaali", "Gandhi Road", "₹"),
    ),
    "Vijayawada": (
        ("Hotel Southern Grand", 4.0, "Andhra & Multi-cuisine", "MG Road", "₹₹"),
        ("Babai Hotel", 4.2, "Andhra Meals", "Gandhi Nagar", "₹"),
        ("Sweet Magic", 3.9, "Sweets & Snacks", "Benz Circle", "₹"),
        ("Minerva Coffee Shop", 4.1, "South Indian & Chinese", "Governorpet", "₹₹"),
    ),
    "Nellore": (
        ("Hotel Haritha", 3.8, "Andhra Cuisine", "Grand Trunk Road", "₹₹"),
        ("Sri Kanya Restaurant", 3.7, "South Indian", "Railway Station Road", "₹"),
        ("Spice Route", 3.6, "Multi-cuisine", "Trunk Road", "₹₹"),
        ("Raju Gari Gaddi", 3.9, "Traditional Andhra", "City Center", "₹"),
    ),
    "Jaipur": (
        ("1135 AD", 4.5, "Rajasthani Cuisine", "Amber Fort", "₹₹₹"),
        ("Chokhi Dhani", 4.3, "Traditional Rajasthani", "Tonk Road", "₹₹₹"),
        ("LMB (Laxmi Misthan Bhandar)", 4.4, "Rajasthani Sweets", "Johari Bazaar", "₹₹"),
        ("Spice Court", 4.2, "Rajasthani & Mughlai", "Civil Lines", "₹₹"),
    ),
    "Kochi": (
        ("The Rice Boat", 4.5, "Kerala Seafood", "Taj Malabar Resort", "₹₹₹"),
        ("Dhe Puttu", 4.3, "Kerala Traditional", "Panampilly Nagar", "₹₹"),
        ("Fort House Restaurant", 4.2, "Continental & Kerala", "Fort Kochi", "₹₹"),
        ("Kayees Biryani", 4.4, "Biryani & Kerala", "Broadway", "₹₹"),
    ),
})

TRANSPORTATION = MappingProxyType({
    "Mumbai": {
        "train_stations": (
            {"name": "Chhatrapati Shivaji Terminus", "code": "CSMT", "distance": "City Center"},
            {"name": "Mumbai Central", "code": "BCT", "distance": "5 km from CST"},
            {"name": "Lokmanya Tilak Terminus", "code": "LTT", "distance": "Northeast Mumbai"},
        ),
        "bus_routes": (
            {"operator": "BEST", "route": "Citywide coverage", "frequency": "Every 5-10 mins"},
            {"operator": "MSRTC", "route": "Mumbai to all Maharashtra", "frequency": "Every 30 mins"},
        ),
        "local_transport": {
            "metro": "Mumbai Metro Line 1, 2A, 7, 2B operational",
            "local": "Central, Western, Harbour lines - lifeline of Mumbai",
            "bus": "BEST buses covering entire city",
            "auto": "Three-wheelers, meter mandatory",
        },
        "airports": (
            {"name": "Chhatrapati Shivaji International", "code": "BOM", "distance": "15 km"},
        ),
    },
    "Delhi": {
        "train_stations": (
            {"name": "New Delhi Railway Station", "code": "NDLS", "distance": "City Center"},
            {"name": "Old Delhi Railway Station", "code": "DLI", "distance": "Old Delhi"},
            {"name": "Hazrat Nizamuddin", "code": "NZM", "distance": "South Delhi"},
        ),
        "bus_routes": (
            {"operator": "DTC", "route": "Delhi city buses", "frequency": "Every 10-15 mins"},
            {"operator": "Cluster Buses", "route": "Modern AC buses", "frequency": "Every 15-20 mins"},
        ),
        "local_transport": {
            "metro": "Delhi Metro - 12 lines covering entire NCR",
            "local": "Limited suburban railway",
            "bus": "DTC and cluster buses extensive network",
            "auto": "CNG auto rickshaws everywhere",
        },
        "airports": (
            {"name": "Indira Gandhi International", "code": "DEL", "distance": "20 km"},
        ),
    },
    "Bangalore": {
        "train_stations": (
            {"name": "KSR Bengaluru City Junction", "code": "SBC", "distance": "City Center"},
            {"name": "Yesvantpur Junction", "code": "YPR", "distance": "North Bangalore"},
            {"name": "Bengaluru Cantonment", "code": "BNC", "distance": "Central Bangalore"},
        ),
        "bus_routes": (
            {"operator": "BMTC", "route": "Citywide coverage", "frequency": "Every 5-15 mins"},
            {"operator": "KSRTC", "route": "Bangalore to all Karnataka", "frequency": "Every 30 mins"},
        ),
        "local_transport": {
            "metro": "Namma Metro Purple and Green lines operational",
            "local": "Limited suburban rail services",
            "bus": "BMTC buses including Vayu Vajra airport service",
            "auto": "Auto rickshaws, app-based booking common",
        },
        "airports": (
            {"name": "Kempegowda International", "code": "BLR", "distance": "35 km"},
        ),
    },
    "Chennai": {
        "train_stations": (
            {"name": "Chennai Central", "code": "MAS", "distance": "City Center"},
            {"name": "Chennai Egmore", "code": "MS", "distance": "3 km from Central"},
            {"name": "Tambaram", "code": "TBM", "distance": "South Chennai"},
        ),
        "bus_routes": (
            {"operator": "MTC", "route": "Chennai city buses", "frequency": "Every 5-10 mins"},
            {"operator": "SETC", "route": "Chennai to all Tamil Nadu", "frequency": "Every 30 mins"},
        ),
        "local_transport": {
            "metro": "Chennai Metro Blue and Green lines operational",
            "local": "Suburban railway and MRTS lines",
            "bus": "MTC buses covering entire city",
            "auto": "Auto rickshaws, agree fare or use meter",
        },
        "airports": (
            {"name": "Chennai International", "code": "MAA", "distance": "16 km"},
        ),
    },
})

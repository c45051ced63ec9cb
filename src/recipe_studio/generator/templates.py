"""
templates.py

Purpose:
    Built-in recipe templates for the generator.

    Each entry is a plain dict so the same shape can be loaded from a JSON
    catalog file (see catalog.load_catalog). Ingredients are
    (name, amount, unit) triples; amount is display text.

    Order matters: when two templates score the same, the one listed first
    wins.
"""
from __future__ import annotations

# -----------------------------------------------------------------------------
# Italian
# -----------------------------------------------------------------------------
DEFAULT_TEMPLATES = [
    dict(
        id="creamy_mushroom_pasta",
        title="Creamy Mushroom Garlic Pasta",
        description=(
            "A rich and creamy pasta dish featuring sautéed mushrooms, garlic, and fresh herbs. "
            "Perfect comfort food that comes together in just 30 minutes."
        ),
        ingredients=[
            ("Pasta (penne or fettuccine)", "12", "oz"),
            ("Mixed mushrooms, sliced", "1", "lb"),
            ("Garlic cloves, minced", "4", "cloves"),
            ("Heavy cream", "1", "cup"),
            ("Parmesan cheese, grated", "1/2", "cup"),
            ("Fresh thyme", "2", "tbsp"),
            ("Olive oil", "3", "tbsp"),
            ("Salt and pepper", "to", "taste"),
        ],
        instructions=[
            "Cook pasta according to package directions until al dente. Reserve 1 cup pasta water before draining.",
            "Heat olive oil in a large skillet over medium-high heat. Add mushrooms and cook until golden brown, about 5-7 minutes.",
            "Add minced garlic and cook for another minute until fragrant.",
            "Pour in heavy cream and bring to a gentle simmer. Add fresh thyme and season with salt and pepper.",
            "Add the cooked pasta to the skillet and toss to combine. Add pasta water as needed to achieve desired consistency.",
            "Remove from heat and stir in Parmesan cheese. Serve immediately with additional cheese if desired.",
        ],
        prep_time_minutes=10,
        cook_time_minutes=20,
        narrative_note=(
            "This creamy mushroom pasta is the perfect balance of earthy flavors and rich textures. "
            "The combination of mixed mushrooms provides depth while the garlic and thyme add aromatic complexity. "
            "It's an elegant dish that feels restaurant-quality but is simple enough for a weeknight dinner."
        ),
        keywords=["creamy", "mushroom", "pasta", "alfredo", "cream", "garlic", "italian"],
    ),
    dict(
        id="spicy_arrabbiata",
        title="Spicy Arrabbiata Pasta",
        description=(
            "A fiery Italian pasta dish with tomatoes, garlic, and red chili peppers. "
            "This classic Roman recipe brings heat and flavor to your dinner table."
        ),
        ingredients=[
            ("Penne pasta", "1", "lb"),
            ("Crushed tomatoes", "28", "oz can"),
            ("Garlic cloves, minced", "6", "cloves"),
            ("Red chili flakes", "2", "tsp"),
            ("Olive oil", "1/4", "cup"),
            ("Fresh basil leaves", "1/4", "cup"),
            ("Parmesan cheese", "1/2", "cup"),
            ("Salt and pepper", "to", "taste"),
        ],
        instructions=[
            "Cook pasta according to package directions until al dente. Reserve 1 cup pasta water.",
            "Heat olive oil in a large skillet over medium heat. Add garlic and chili flakes, cook for 1 minute.",
            "Add crushed tomatoes and simmer for 15-20 minutes until sauce thickens.",
            "Season with salt and pepper. Add cooked pasta and toss with sauce.",
            "Add pasta water as needed for consistency. Remove from heat.",
            "Garnish with fresh basil and Parmesan cheese. Serve immediately.",
        ],
        prep_time_minutes=10,
        cook_time_minutes=25,
        narrative_note=(
            "This authentic Arrabbiata brings the heat of Rome to your kitchen. "
            "The combination of garlic, chili, and tomatoes creates a sauce that's both simple and intensely flavorful. "
            "Perfect for those who love a spicy kick in their pasta!"
        ),
        keywords=["spicy", "pasta", "arrabbiata", "hot", "chili", "tomato", "red sauce", "italian"],
    ),
    dict(
        id="carbonara_pasta",
        title="Classic Spaghetti Carbonara",
        description=(
            "An authentic Roman pasta dish with eggs, cheese, pancetta, and black pepper. "
            "Simple ingredients create an incredibly rich and satisfying meal."
        ),
        ingredients=[
            ("Spaghetti", "1", "lb"),
            ("Pancetta, diced", "6", "oz"),
            ("Large eggs", "4", "eggs"),
            ("Pecorino Romano, grated", "1", "cup"),
            ("Black pepper, freshly ground", "2", "tsp"),
            ("Salt", "to", "taste"),
        ],
        instructions=[
            "Cook spaghetti in salted boiling water until al dente. Reserve 1 cup pasta water.",
            "Cook pancetta in a large skillet until crispy, about 5-7 minutes.",
            "In a bowl, whisk together eggs, cheese, and black pepper.",
            "Add hot pasta to the skillet with pancetta and remove from heat.",
            "Quickly stir in egg mixture, adding pasta water as needed to create a creamy sauce.",
            "Serve immediately with extra cheese and black pepper.",
        ],
        prep_time_minutes=10,
        cook_time_minutes=15,
        narrative_note=(
            "True Roman carbonara uses no cream - just eggs, cheese, and technique to create the silkiest sauce. "
            "The key is working quickly and using the pasta's heat to cook the eggs without scrambling them."
        ),
        keywords=["carbonara", "pasta", "egg", "pancetta", "bacon", "cheese", "italian", "roman"],
    ),
    # -------------------------------------------------------------------------
    # Salads
    # -------------------------------------------------------------------------
    dict(
        id="quinoa_salad",
        title="Rainbow Quinoa Power Bowl",
        description=(
            "A vibrant, nutrient-packed salad featuring fluffy quinoa, roasted vegetables, and a zesty tahini dressing. "
            "This colorful bowl is both satisfying and energizing."
        ),
        ingredients=[
            ("Quinoa, rinsed", "1", "cup"),
            ("Sweet potato, cubed", "1", "large"),
            ("Bell peppers, sliced", "2", "peppers"),
            ("Red onion, sliced", "1/2", "onion"),
            ("Chickpeas, drained", "1", "can"),
            ("Baby spinach", "4", "cups"),
            ("Tahini", "3", "tbsp"),
            ("Lemon juice", "2", "tbsp"),
            ("Olive oil", "2", "tbsp"),
            ("Maple syrup", "1", "tbsp"),
        ],
        instructions=[
            "Preheat oven to 425°F. Cook quinoa according to package directions and let cool.",
            "Toss sweet potato, bell peppers, and red onion with olive oil, salt, and pepper. Roast for 25-30 minutes until tender.",
            "In a small bowl, whisk together tahini, lemon juice, maple syrup, and 2-3 tbsp water until smooth.",
            "In a large bowl, combine cooked quinoa, roasted vegetables, chickpeas, and spinach.",
            "Drizzle with tahini dressing and toss gently to combine.",
            "Serve immediately or chill for up to 2 hours before serving.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=30,
        narrative_note=(
            "This rainbow quinoa bowl is a celebration of colors, textures, and flavors. "
            "Each ingredient brings its own nutritional benefits while the tahini dressing ties everything together "
            "with its creamy, nutty richness. It's a complete meal that will leave you feeling satisfied and energized."
        ),
        keywords=["quinoa", "salad", "healthy", "bowl", "power bowl", "grain", "vegetables", "tahini"],
    ),
    dict(
        id="greek_salad",
        title="Traditional Greek Village Salad",
        description=(
            "A fresh and authentic Greek salad with ripe tomatoes, crisp cucumbers, red onions, olives, "
            "and creamy feta cheese, dressed with olive oil and herbs."
        ),
        ingredients=[
            ("Large tomatoes, cut in wedges", "4", "tomatoes"),
            ("Cucumber, sliced thick", "1", "large"),
            ("Red onion, sliced thin", "1", "medium"),
            ("Kalamata olives", "1", "cup"),
            ("Feta cheese, cubed", "8", "oz"),
            ("Extra virgin olive oil", "1/3", "cup"),
            ("Red wine vinegar", "2", "tbsp"),
            ("Dried oregano", "1", "tsp"),
            ("Salt and pepper", "to", "taste"),
        ],
        instructions=[
            "Cut tomatoes into wedges and place in a large bowl.",
            "Add thick cucumber slices and thin red onion slices.",
            "Add Kalamata olives and cubed feta cheese.",
            "In a small bowl, whisk together olive oil, vinegar, and oregano.",
            "Pour dressing over salad and toss gently.",
            "Season with salt and pepper. Let sit for 10 minutes before serving.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=0,
        narrative_note=(
            "This authentic Greek salad captures the essence of Mediterranean cuisine. "
            "The key is using the ripest tomatoes and best quality olive oil and feta. "
            "It's not just a side dish - it's a celebration of simple, fresh ingredients at their peak."
        ),
        keywords=["greek", "salad", "feta", "olive", "tomato", "cucumber", "mediterranean"],
    ),
    dict(
        id="caesar_salad",
        title="Classic Caesar Salad",
        description=(
            "Crisp romaine lettuce with homemade Caesar dressing, parmesan cheese, and crunchy croutons. "
            "A timeless favorite that never goes out of style."
        ),
        ingredients=[
            ("Romaine lettuce, chopped", "2", "heads"),
            ("Parmesan cheese, grated", "1/2", "cup"),
            ("Croutons", "1", "cup"),
            ("Mayonnaise", "1/2", "cup"),
            ("Lemon juice", "2", "tbsp"),
            ("Worcestershire sauce", "1", "tsp"),
            ("Garlic cloves, minced", "2", "cloves"),
            ("Anchovy paste", "1", "tsp"),
        ],
        instructions=[
            "Wash and chop romaine lettuce, then chill in refrigerator.",
            "In a bowl, whisk together mayonnaise, lemon juice, Worcestershire, garlic, and anchovy paste.",
            "Place chilled lettuce in a large serving bowl.",
            "Drizzle with Caesar dressing and toss to coat evenly.",
            "Top with grated Parmesan cheese and croutons.",
            "Serve immediately while lettuce is crisp.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=0,
        narrative_note=(
            "The secret to great Caesar salad is in the dressing balance - creamy, tangy, and umami-rich. "
            "Fresh, cold lettuce and quality Parmesan make all the difference in this classic."
        ),
        keywords=["caesar", "salad", "romaine", "parmesan", "croutons", "anchovy"],
    ),
    # -------------------------------------------------------------------------
    # Chicken
    # -------------------------------------------------------------------------
    dict(
        id="herb_chicken",
        title="Mediterranean Herb-Crusted Chicken",
        description=(
            "Juicy baked chicken breasts with a flavorful herb crust, served with roasted vegetables. "
            "A healthy and delicious dinner that's ready in under an hour."
        ),
        ingredients=[
            ("Chicken breasts, boneless", "4", "pieces"),
            ("Olive oil", "3", "tbsp"),
            ("Fresh oregano, chopped", "2", "tbsp"),
            ("Fresh basil, chopped", "2", "tbsp"),
            ("Garlic cloves, minced", "3", "cloves"),
            ("Lemon zest", "1", "lemon"),
            ("Panko breadcrumbs", "1/2", "cup"),
            ("Cherry tomatoes", "2", "cups"),
            ("Zucchini, sliced", "2", "medium"),
        ],
        instructions=[
            "Preheat oven to 400°F. Line a baking sheet with parchment paper.",
            "In a bowl, mix olive oil, oregano, basil, garlic, and lemon zest.",
            "Season chicken breasts with salt and pepper, then brush with herb mixture.",
            "Press panko breadcrumbs onto the chicken to create a crust.",
            "Arrange chicken on baking sheet with cherry tomatoes and zucchini.",
            "Bake for 25-30 minutes until chicken reaches 165°F internal temperature.",
            "Let rest for 5 minutes before serving with the roasted vegetables.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=30,
        narrative_note=(
            "This Mediterranean chicken dish brings together the bright flavors of fresh herbs, garlic, and lemon. "
            "The herb crust keeps the chicken incredibly moist while adding a delightful texture contrast. "
            "Paired with colorful roasted vegetables, it's a complete, nutritious meal."
        ),
        keywords=["herb", "chicken", "mediterranean", "baked", "roasted", "herbs"],
    ),
    dict(
        id="honey_chicken",
        title="Honey Garlic Glazed Chicken Thighs",
        description=(
            "Succulent chicken thighs with a sweet and savory honey garlic glaze. "
            "This one-pan dinner is packed with flavor and incredibly easy to make."
        ),
        ingredients=[
            ("Chicken thighs, bone-in", "8", "pieces"),
            ("Honey", "1/3", "cup"),
            ("Soy sauce", "1/4", "cup"),
            ("Garlic cloves, minced", "6", "cloves"),
            ("Fresh ginger, grated", "1", "tbsp"),
            ("Rice vinegar", "2", "tbsp"),
            ("Sesame oil", "1", "tbsp"),
            ("Green onions, chopped", "3", "stalks"),
            ("Sesame seeds", "1", "tbsp"),
        ],
        instructions=[
            "Preheat oven to 425°F. Season chicken thighs with salt and pepper.",
            "In a bowl, whisk together honey, soy sauce, garlic, ginger, and rice vinegar.",
            "Heat sesame oil in an oven-safe skillet over medium-high heat.",
            "Sear chicken thighs skin-side down for 5 minutes until golden.",
            "Flip chicken and brush with honey glaze. Transfer to oven.",
            "Bake for 25-30 minutes, basting with glaze every 10 minutes.",
            "Garnish with green onions and sesame seeds before serving.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=35,
        narrative_note=(
            "This honey garlic chicken delivers restaurant-quality flavors with minimal effort. "
            "The glaze caramelizes beautifully in the oven, creating a sticky, flavorful coating that's absolutely irresistible. "
            "It's comfort food at its finest!"
        ),
        keywords=["honey", "chicken", "sweet", "glaze", "asian", "soy", "garlic"],
    ),
    dict(
        id="buffalo_chicken",
        title="Crispy Buffalo Chicken Wings",
        description=(
            "Perfectly crispy chicken wings tossed in tangy buffalo sauce. "
            "These crowd-pleasing wings are perfect for game day or any gathering."
        ),
        ingredients=[
            ("Chicken wings, split", "2", "lbs"),
            ("Hot sauce", "1/2", "cup"),
            ("Butter", "1/4", "cup"),
            ("White vinegar", "1", "tbsp"),
            ("Garlic powder", "1", "tsp"),
            ("Celery sticks", "6", "stalks"),
            ("Blue cheese dressing", "1/2", "cup"),
        ],
        instructions=[
            "Preheat oven to 425°F. Pat wings dry and season with salt and pepper.",
            "Arrange wings on a baking sheet lined with parchment paper.",
            "Bake for 45-50 minutes until crispy and golden brown.",
            "Meanwhile, melt butter and mix with hot sauce, vinegar, and garlic powder.",
            "Toss hot wings in buffalo sauce until well coated.",
            "Serve immediately with celery sticks and blue cheese dressing.",
        ],
        prep_time_minutes=10,
        cook_time_minutes=50,
        narrative_note=(
            "The secret to perfect buffalo wings is getting them crispy in the oven first, then tossing in the sauce. "
            "The combination of hot sauce and butter creates that classic tangy, rich buffalo flavor."
        ),
        keywords=["buffalo", "chicken", "wings", "spicy", "hot sauce", "crispy"],
    ),
    # -------------------------------------------------------------------------
    # Soups
    # -------------------------------------------------------------------------
    dict(
        id="tomato_soup",
        title="Roasted Tomato Basil Soup",
        description=(
            "A velvety smooth soup made from roasted tomatoes and fresh basil. "
            "This comforting classic is perfect for any season and pairs beautifully with grilled cheese."
        ),
        ingredients=[
            ("Roma tomatoes, halved", "3", "lbs"),
            ("Yellow onion, quartered", "1", "large"),
            ("Garlic cloves", "6", "cloves"),
            ("Olive oil", "1/4", "cup"),
            ("Vegetable broth", "2", "cups"),
            ("Heavy cream", "1/2", "cup"),
            ("Fresh basil leaves", "1/4", "cup"),
            ("Salt and pepper", "to", "taste"),
        ],
        instructions=[
            "Preheat oven to 400°F. Toss tomatoes, onion, and garlic with olive oil.",
            "Roast vegetables for 45 minutes until caramelized and tender.",
            "Transfer roasted vegetables to a large pot with vegetable broth.",
            "Simmer for 15 minutes, then blend until smooth using an immersion blender.",
            "Stir in heavy cream and fresh basil. Season with salt and pepper.",
            "Simmer for 5 more minutes and serve hot with crusty bread.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=60,
        narrative_note=(
            "Roasting the tomatoes first adds incredible depth and sweetness to this classic soup. "
            "The caramelization process concentrates the flavors, while fresh basil adds a bright, aromatic finish. "
            "It's comfort in a bowl!"
        ),
        keywords=["tomato", "soup", "basil", "roasted", "comfort"],
    ),
    dict(
        id="chicken_noodle_soup",
        title="Homemade Chicken Noodle Soup",
        description=(
            "The ultimate comfort food with tender chicken, vegetables, and egg noodles in a rich, flavorful broth. "
            "Perfect for cold days or when you need some comfort."
        ),
        ingredients=[
            ("Chicken breast, diced", "1", "lb"),
            ("Egg noodles", "8", "oz"),
            ("Carrots, sliced", "3", "large"),
            ("Celery stalks, chopped", "3", "stalks"),
            ("Yellow onion, diced", "1", "medium"),
            ("Chicken broth", "8", "cups"),
            ("Fresh thyme", "1", "tsp"),
            ("Bay leaves", "2", "leaves"),
        ],
        instructions=[
            "In a large pot, sauté onion, carrots, and celery until softened, about 5 minutes.",
            "Add chicken broth, thyme, and bay leaves. Bring to a boil.",
            "Add diced chicken and simmer for 15 minutes until cooked through.",
            "Add egg noodles and cook according to package directions.",
            "Season with salt and pepper to taste.",
            "Remove bay leaves and serve hot with crackers or bread.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=30,
        narrative_note=(
            "Nothing beats homemade chicken noodle soup for comfort and nourishment. "
            "The key is building layers of flavor with aromatic vegetables and herbs, "
            "creating a broth that's both hearty and healing."
        ),
        keywords=["chicken", "noodle", "soup", "comfort", "broth", "vegetables"],
    ),
    # -------------------------------------------------------------------------
    # Desserts
    # -------------------------------------------------------------------------
    dict(
        id="chocolate_cake",
        title="Decadent Double Chocolate Cake",
        description=(
            "A rich, moist chocolate cake with layers of chocolate ganache. "
            "This indulgent dessert is perfect for special occasions or when you need a chocolate fix."
        ),
        ingredients=[
            ("All-purpose flour", "2", "cups"),
            ("Cocoa powder", "3/4", "cup"),
            ("Sugar", "2", "cups"),
            ("Eggs", "2", "large"),
            ("Buttermilk", "1", "cup"),
            ("Vegetable oil", "1/2", "cup"),
            ("Hot coffee", "1", "cup"),
            ("Dark chocolate, chopped", "8", "oz"),
            ("Heavy cream", "1", "cup"),
        ],
        instructions=[
            "Preheat oven to 350°F. Grease and flour two 9-inch cake pans.",
            "Mix flour, cocoa, sugar, baking soda, and salt in a large bowl.",
            "In another bowl, whisk eggs, buttermilk, and oil. Add to dry ingredients.",
            "Gradually stir in hot coffee until smooth. Divide between prepared pans.",
            "Bake for 30-35 minutes until a toothpick comes out clean.",
            "For ganache, heat cream and pour over chopped chocolate. Stir until smooth.",
            "Cool cakes completely, then layer with ganache between and on top.",
        ],
        prep_time_minutes=20,
        cook_time_minutes=35,
        narrative_note=(
            "This chocolate cake is the ultimate indulgence for chocolate lovers. "
            "The secret ingredient - hot coffee - intensifies the chocolate flavor without making it taste like coffee. "
            "The result is an incredibly moist, rich cake that's pure decadence."
        ),
        keywords=["chocolate", "cake", "dessert", "sweet", "decadent", "rich"],
    ),
    dict(
        id="chocolate_chip_cookies",
        title="Perfect Chocolate Chip Cookies",
        description=(
            "Soft, chewy chocolate chip cookies with crispy edges and gooey centers. "
            "These classic cookies are loaded with chocolate chips and pure vanilla flavor."
        ),
        ingredients=[
            ("All-purpose flour", "2 1/4", "cups"),
            ("Butter, softened", "1", "cup"),
            ("Brown sugar", "3/4", "cup"),
            ("White sugar", "3/4", "cup"),
            ("Large eggs", "2", "eggs"),
            ("Vanilla extract", "2", "tsp"),
            ("Baking soda", "1", "tsp"),
            ("Salt", "1", "tsp"),
            ("Chocolate chips", "2", "cups"),
        ],
        instructions=[
            "Preheat oven to 375°F. Line baking sheets with parchment paper.",
            "Cream together butter and both sugars until light and fluffy.",
            "Beat in eggs one at a time, then add vanilla extract.",
            "In a separate bowl, whisk together flour, baking soda, and salt.",
            "Gradually mix dry ingredients into wet ingredients until just combined.",
            "Fold in chocolate chips, then drop rounded tablespoons onto baking sheets.",
            "Bake for 9-11 minutes until edges are golden brown. Cool on baking sheet for 5 minutes.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=11,
        narrative_note=(
            "The perfect chocolate chip cookie has the ideal balance of crispy edges and chewy centers. "
            "Using a mix of brown and white sugar creates the perfect texture, "
            "while plenty of vanilla enhances the chocolate flavor."
        ),
        keywords=["cookie", "chocolate chip", "sweet", "dessert", "baked", "chewy"],
    ),
    # -------------------------------------------------------------------------
    # Asian / Mexican / Indian
    # -------------------------------------------------------------------------
    dict(
        id="fried_rice",
        title="Classic Vegetable Fried Rice",
        description=(
            "A quick and flavorful fried rice with mixed vegetables, eggs, and soy sauce. "
            "This versatile dish is perfect for using up leftover rice and vegetables."
        ),
        ingredients=[
            ("Cooked rice, day-old", "4", "cups"),
            ("Eggs, beaten", "3", "eggs"),
            ("Mixed vegetables, frozen", "1", "cup"),
            ("Green onions, chopped", "4", "stalks"),
            ("Garlic cloves, minced", "3", "cloves"),
            ("Soy sauce", "3", "tbsp"),
            ("Sesame oil", "1", "tbsp"),
            ("Vegetable oil", "2", "tbsp"),
        ],
        instructions=[
            "Heat vegetable oil in a large wok or skillet over high heat.",
            "Add beaten eggs and scramble until just set. Remove and set aside.",
            "Add more oil if needed, then add garlic and cook for 30 seconds.",
            "Add cold rice, breaking up any clumps with a spatula.",
            "Stir-fry rice for 3-4 minutes until heated through and slightly crispy.",
            "Add mixed vegetables and cook for 2 minutes until heated.",
            "Return eggs to pan, add soy sauce and sesame oil, and toss to combine.",
            "Garnish with green onions and serve immediately.",
        ],
        prep_time_minutes=10,
        cook_time_minutes=10,
        narrative_note=(
            "The secret to great fried rice is using day-old rice that's been refrigerated - "
            "it fries up perfectly without getting mushy. "
            "High heat and quick cooking preserve the texture and create that authentic wok flavor."
        ),
        keywords=["fried rice", "rice", "asian", "chinese", "vegetables", "egg"],
    ),
    dict(
        id="chicken_tacos",
        title="Authentic Chicken Tacos",
        description=(
            "Tender, seasoned chicken served in warm tortillas with fresh toppings. "
            "These authentic-style tacos are bursting with flavor and perfect for any meal."
        ),
        ingredients=[
            ("Chicken thighs, boneless", "2", "lbs"),
            ("Corn tortillas", "12", "tortillas"),
            ("White onion, diced", "1", "medium"),
            ("Cilantro, chopped", "1/2", "cup"),
            ("Lime wedges", "2", "limes"),
            ("Chili powder", "2", "tsp"),
            ("Cumin", "1", "tsp"),
            ("Garlic powder", "1", "tsp"),
            ("Salt and pepper", "to", "taste"),
        ],
        instructions=[
            "Season chicken thighs with chili powder, cumin, garlic powder, salt, and pepper.",
            "Heat a skillet over medium-high heat and cook chicken for 6-7 minutes per side.",
            "Let chicken rest for 5 minutes, then dice into small pieces.",
            "Warm tortillas in a dry skillet or over an open flame until slightly charred.",
            "Fill each tortilla with chicken, diced onion, and cilantro.",
            "Serve with lime wedges and your favorite hot sauce.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=20,
        narrative_note=(
            "Authentic tacos are all about simplicity and quality ingredients. "
            "The key is properly seasoned meat, warm tortillas, and fresh toppings that let each flavor shine through."
        ),
        keywords=["taco", "chicken", "mexican", "tortilla", "cilantro", "lime"],
    ),
    dict(
        id="butter_chicken",
        title="Creamy Butter Chicken",
        description=(
            "Rich and creamy Indian curry with tender chicken in a tomato-based sauce with aromatic spices. "
            "Served with basmati rice or naan bread."
        ),
        ingredients=[
            ("Chicken breast, cubed", "2", "lbs"),
            ("Crushed tomatoes", "28", "oz can"),
            ("Heavy cream", "1", "cup"),
            ("Butter", "4", "tbsp"),
            ("Onion, diced", "1", "large"),
            ("Garlic cloves, minced", "4", "cloves"),
            ("Fresh ginger, grated", "1", "tbsp"),
            ("Garam masala", "2", "tsp"),
            ("Paprika", "1", "tsp"),
        ],
        instructions=[
            "Season chicken with salt, pepper, and half the garam masala.",
            "Heat butter in a large skillet and cook chicken until golden. Remove and set aside.",
            "In the same pan, sauté onion until softened, about 5 minutes.",
            "Add garlic, ginger, and remaining spices. Cook for 1 minute until fragrant.",
            "Add crushed tomatoes and simmer for 10 minutes until thickened.",
            "Stir in cream and return chicken to the pan.",
            "Simmer for 10 more minutes until chicken is cooked through.",
            "Serve over basmati rice with fresh cilantro.",
        ],
        prep_time_minutes=15,
        cook_time_minutes=30,
        narrative_note=(
            "This butter chicken strikes the perfect balance between rich, creamy texture and aromatic Indian spices. "
            "The tomato base provides acidity that balances the richness of the cream and butter."
        ),
        keywords=["butter chicken", "indian", "curry", "creamy", "spicy", "tomato"],
    ),
]

# -----------------------------------------------------------------------------
# Cuisine affinity: requested cuisine (lowercase) -> template ids that get the
# cuisine bonus during scoring.
# -----------------------------------------------------------------------------
DEFAULT_CUISINE_AFFINITY = {
    "italian": ["creamy_mushroom_pasta", "spicy_arrabbiata", "carbonara_pasta"],
    "mexican": ["chicken_tacos"],
    "indian": ["butter_chicken"],
    "chinese": ["fried_rice"],
    "mediterranean": ["greek_salad", "herb_chicken"],
}

# -----------------------------------------------------------------------------
# Category fallback, checked top to bottom when no template scores.
# -----------------------------------------------------------------------------
DEFAULT_CATEGORIES = [
    dict(name="pasta", cues=["pasta", "italian"],
         members=["creamy_mushroom_pasta", "spicy_arrabbiata", "carbonara_pasta"]),
    dict(name="salad", cues=["salad", "healthy"],
         members=["quinoa_salad", "greek_salad", "caesar_salad"]),
    dict(name="chicken", cues=["chicken"],
         members=["herb_chicken", "honey_chicken", "buffalo_chicken",
                  "butter_chicken", "chicken_tacos", "chicken_noodle_soup"]),
    dict(name="soup", cues=["soup"],
         members=["tomato_soup", "chicken_noodle_soup"]),
    dict(name="dessert", cues=["dessert", "sweet", "chocolate", "cake", "cookie"],
         members=["chocolate_cake", "chocolate_chip_cookies"]),
    dict(name="mexican", cues=["mexican", "taco"], members=["chicken_tacos"]),
    dict(name="indian", cues=["indian", "curry"], members=["butter_chicken"]),
    dict(name="asian", cues=["asian", "chinese", "rice"], members=["fried_rice"]),
]

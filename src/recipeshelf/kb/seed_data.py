"""Seed tables for the knowledge base. Pure data, no logic."""

from typing import NamedTuple


class IngredientSeed(NamedTuple):
    name: str
    category: str
    aliases: list[str]
    default_unit: str | None = None


class UnitSeed(NamedTuple):
    name: str
    type: str
    abbreviation: str | None = None
    aliases: tuple[str, ...] | list[str] = ()
    base_unit: str | None = None
    conversion_to_base: float | None = None


class ModifierSeed(NamedTuple):
    name: str
    type: str
    aliases: list[str]


# fmt: off
INGREDIENT_SEEDS: list[IngredientSeed] = [
    # Proteins
    IngredientSeed("Chicken Breast", "protein", ["chicken breasts", "breast of chicken"], "lb"),
    IngredientSeed("Chicken Thigh", "protein", ["chicken thighs"], "lb"),
    IngredientSeed("Chicken", "protein", ["whole chicken", "chicken wings"], "lb"),
    IngredientSeed("Ground Beef", "protein", ["beef mince", "minced beef", "hamburger meat"], "lb"),
    IngredientSeed("Beef Steak", "protein", ["steak", "beefsteak"], "lb"),
    IngredientSeed("Chuck Roast", "protein", ["beef chuck", "pot roast", "chuck", "beef chuck pot roast", "chuck pot roast"], "lb"),
    IngredientSeed("Flank Steak", "protein", ["flank"], "lb"),
    IngredientSeed("Round Steak", "protein", ["beef round", "top round"], "lb"),
    IngredientSeed("Beef Shin", "protein", ["beef shank", "shin beef"], "lb"),
    IngredientSeed("Pork Chop", "protein", ["pork chops"], "piece"),
    IngredientSeed("Ground Pork", "protein", ["pork mince", "minced pork"], "lb"),
    IngredientSeed("Pork Ribs", "protein", ["ribs", "spare ribs", "baby back ribs", "country-style pork ribs", "st. louis ribs", "st. louis or baby back ribs"], "lb"),
    IngredientSeed("Pork Bones", "protein", ["pork neck bones", "neck bones", "pork bone"], "lb"),
    IngredientSeed("Pigs Feet", "protein", ["pigs trotters", "pig feet", "pig trotters"], "lb"),
    IngredientSeed("Beef Bones", "protein", ["beef bone", "marrow bones", "soup bones"], "lb"),
    IngredientSeed("Pork Tenderloin", "protein", ["pork loin", "tenderloin"], "lb"),
    IngredientSeed("Bacon", "protein", ["streaky bacon", "bacon strips"], "slice"),
    IngredientSeed("Salmon", "protein", ["salmon fillet", "salmon filet"], "lb"),
    IngredientSeed("Shrimp", "protein", ["prawns", "jumbo shrimp"], "lb"),
    IngredientSeed("Tuna", "protein", ["tuna steak", "canned tuna"], "oz"),
    IngredientSeed("Turkey", "protein", ["turkey breast", "ground turkey"], "lb"),
    IngredientSeed("Sausage", "protein", ["sausages", "italian sausage", "pork sausage"], "piece"),
    IngredientSeed("Kielbasa", "protein", ["polish sausage", "kielbassa"], "piece"),
    IngredientSeed("Beef Short Ribs", "protein", ["short ribs", "beef ribs"], "lb"),
    IngredientSeed("Sirloin Steak", "protein", ["sirloin", "top sirloin"], "lb"),
    IngredientSeed("Steak", "protein", ["steaks", "beef steak", "hangar steak", "skirt steak", "hanger steak"], "lb"),
    IngredientSeed("Pork Belly", "protein", ["belly pork"], "lb"),
    IngredientSeed("Pork Shoulder", "protein", ["pork butt", "boston butt", "pork butt or leg joint"], "lb"),
    IngredientSeed("Ham", "protein", ["boiled ham", "deli ham", "smoked ham"], "lb"),
    IngredientSeed("Capicola", "protein", ["capocollo", "coppa"], "lb"),
    IngredientSeed("Salami", "protein", ["genoa salami", "italian salami"], "lb"),
    IngredientSeed("Pepperoni", "protein", ["sliced pepperoni"], "oz"),
    IngredientSeed("Cod", "protein", ["cod fillet", "cod or halibut"], "lb"),
    IngredientSeed("Halibut", "protein", ["halibut fillet"], "lb"),
    IngredientSeed("Tofu", "protein", ["bean curd"], "oz"),
    IngredientSeed("Egg", "protein", ["eggs", "large egg", "large eggs", "egg yolks", "egg whites"], "piece"),

    # Produce - Vegetables
    IngredientSeed("Onion", "produce", ["onions", "yellow onion", "white onion", "red onion"], "piece"),
    IngredientSeed("Garlic", "produce", ["garlic clove", "garlic cloves"], "clove"),
    IngredientSeed("Tomato", "produce", ["tomatoes", "roma tomato"], "piece"),
    IngredientSeed("Potato", "produce", ["potatoes", "russet potato", "yukon gold"], "piece"),
    IngredientSeed("Carrot", "produce", ["carrots"], "piece"),
    IngredientSeed("Celery", "produce", ["celery stalk", "celery stalks"], "stalk"),
    IngredientSeed("Bell Pepper", "produce", ["bell peppers", "capsicum", "red pepper", "green pepper"], "piece"),
    IngredientSeed("Broccoli", "produce", ["broccoli florets"], "cup"),
    IngredientSeed("Spinach", "produce", ["baby spinach", "fresh spinach"], "cup"),
    IngredientSeed("Lettuce", "produce", ["romaine lettuce", "iceberg lettuce"], "head"),
    IngredientSeed("Mushroom", "produce", ["mushrooms", "button mushrooms", "cremini"], "cup"),
    IngredientSeed("Zucchini", "produce", ["courgette", "summer squash"], "piece"),
    IngredientSeed("Cucumber", "produce", ["cucumbers"], "piece"),
    IngredientSeed("Green Beans", "produce", ["string beans", "snap beans"], "cup"),
    IngredientSeed("Corn", "produce", ["sweet corn", "corn kernels"], "cup"),
    IngredientSeed("Peas", "produce", ["green peas", "frozen peas"], "cup"),
    IngredientSeed("Black Beans", "produce", ["canned black beans", "black bean"], "can"),
    IngredientSeed("Kidney Beans", "produce", ["red kidney beans", "canned kidney beans"], "can"),
    IngredientSeed("Pinto Beans", "produce", ["canned pinto beans"], "can"),
    IngredientSeed("Chickpeas", "produce", ["garbanzo beans", "canned chickpeas"], "can"),
    IngredientSeed("Lentils", "produce", ["red lentils", "green lentils", "brown lentils"], "cup"),
    IngredientSeed("Asparagus", "produce", ["asparagus spears"], "bunch"),
    IngredientSeed("Cauliflower", "produce", ["cauliflower florets"], "head"),
    IngredientSeed("Cabbage", "produce", ["green cabbage", "red cabbage"], "head"),
    IngredientSeed("Kale", "produce", ["curly kale"], "bunch"),
    IngredientSeed("Ginger", "produce", ["fresh ginger", "ginger root"], "inch"),
    IngredientSeed("Jalapeño", "produce", ["jalapeno", "jalapeño pepper"], "piece"),
    IngredientSeed("Serrano Pepper", "produce", ["serrano", "serrano chile"], "piece"),
    IngredientSeed("Poblano Pepper", "produce", ["poblano", "poblano chile", "poblano chile pepper", "poblano chili pepper"], "piece"),
    IngredientSeed("Hungarian Pepper", "produce", ["hungarian red pepper", "hungarian wax pepper"], "piece"),
    IngredientSeed("Pepperoncini", "produce", ["pepperoncini peppers", "pepperoncino"], "piece"),
    IngredientSeed("Green Pepper", "produce", ["green bell pepper", "green peppers"], "piece"),
    IngredientSeed("Red Pepper", "produce", ["red bell pepper", "red peppers"], "piece"),
    IngredientSeed("Shallot", "produce", ["shallots"], "piece"),
    IngredientSeed("Avocado", "produce", ["avocados"], "piece"),
    IngredientSeed("Green Onion", "produce", ["scallion", "scallions", "spring onion", "green onions"], "piece"),
    IngredientSeed("Bean Sprouts", "produce", ["mung bean sprouts", "sprouts"], "cup"),
    IngredientSeed("Bok Choy", "produce", ["bok choy leaves", "baby bok choy", "pak choi"], "cup"),
    IngredientSeed("Arugula", "produce", ["arugula leaves", "rocket"], "cup"),
    IngredientSeed("Artichoke Hearts", "produce", ["artichoke", "canned artichoke hearts"], "can"),
    IngredientSeed("Plantains", "produce", ["plantain", "green plantains"], "piece"),
    IngredientSeed("Mango", "produce", ["mangoes", "ripe mango"], "piece"),
    IngredientSeed("Strawberries", "produce", ["strawberry", "fresh strawberries"], "cup"),
    IngredientSeed("Yuca", "produce", ["cassava", "yucca"], "piece"),
    IngredientSeed("Spaghetti Squash", "produce", ["squash"], "piece"),
    IngredientSeed("Chives", "produce", ["fresh chives"], "tablespoon"),
    IngredientSeed("Green Chiles", "produce", ["green chilis", "hatch green chiles", "canned green chiles"], "can"),
    IngredientSeed("Habanero", "produce", ["habanero pepper", "habanero peppers"], "piece"),
    IngredientSeed("Cherry Peppers", "produce", ["hot cherry peppers", "pickled cherry peppers"], "piece"),
    IngredientSeed("Thai Chili", "produce", ["thai chilis", "birds eye chili", "birds eye chiles", "dried thai chilis"], "piece"),
    IngredientSeed("Red Chili Pepper", "produce", ["red chili", "red chile pepper", "long red chili", "dried red chili"], "piece"),
    IngredientSeed("Sichuan Chili", "produce", ["sichuan chilis", "sichuan dried chilis", "szechuan chili", "facing heaven chili"], "piece"),

    # Produce - Fruits
    IngredientSeed("Lemon", "produce", ["lemons"], "piece"),
    IngredientSeed("Lime", "produce", ["limes"], "piece"),
    IngredientSeed("Orange", "produce", ["oranges"], "piece"),
    IngredientSeed("Apple", "produce", ["apples"], "piece"),
    IngredientSeed("Banana", "produce", ["bananas"], "piece"),
    IngredientSeed("Strawberry", "produce", ["strawberries"], "cup"),
    IngredientSeed("Blueberry", "produce", ["blueberries"], "cup"),

    # Specialty produce
    IngredientSeed("Cherry Tomatoes", "produce", ["cherry tomato", "grape tomatoes"], "cup"),
    IngredientSeed("Roma Tomatoes", "produce", ["roma tomato", "plum tomatoes"], "piece"),
    IngredientSeed("San Marzano Tomatoes", "produce", ["san marzano"], "can"),
    IngredientSeed("Kalamata Olives", "produce", ["kalamata", "greek olives"], "cup"),
    IngredientSeed("Black Olives", "produce", ["ripe olives", "sliced olives"], "can"),
    IngredientSeed("Green Olives", "produce", ["spanish olives", "manzanilla olives"], "cup"),

    # Dairy
    IngredientSeed("Milk", "dairy", ["whole milk", "2% milk", "skim milk"], "cup"),
    IngredientSeed("Half-and-Half", "dairy", ["half and half", "half & half"], "cup"),
    IngredientSeed("Butter", "dairy", ["unsalted butter", "salted butter"], "tablespoon"),
    IngredientSeed("Cheddar Cheese", "dairy", ["cheddar", "sharp cheddar", "mexican cheese blend"], "cup"),
    IngredientSeed("Mozzarella", "dairy", ["mozzarella cheese", "fresh mozzarella"], "cup"),
    IngredientSeed("Parmesan", "dairy", ["parmesan cheese", "parmigiano reggiano"], "cup"),
    IngredientSeed("Cream Cheese", "dairy", ["philadelphia"], "oz"),
    IngredientSeed("Sour Cream", "dairy", ["soured cream"], "cup"),
    IngredientSeed("Heavy Cream", "dairy", ["heavy whipping cream", "whipping cream", "double cream"], "cup"),
    IngredientSeed("Yogurt", "dairy", ["plain yogurt", "greek yogurt", "nonfat yogurt"], "cup"),
    IngredientSeed("Feta Cheese", "dairy", ["feta", "crumbled feta", "goat cheese"], "cup"),
    IngredientSeed("Ricotta", "dairy", ["ricotta cheese"], "cup"),
    IngredientSeed("Gouda Cheese", "dairy", ["gouda", "smoked gouda"], "cup"),
    IngredientSeed("Monterey Jack Cheese", "dairy", ["monterey jack", "pepper jack"], "cup"),
    IngredientSeed("Blue Cheese", "dairy", ["blue cheese crumbles", "gorgonzola"], "oz"),
    IngredientSeed("Provolone Cheese", "dairy", ["provolone", "sliced provolone"], "oz"),
    IngredientSeed("Cotija Cheese", "dairy", ["cotija", "queso cotija"], "cup"),
    IngredientSeed("Mexican Cheese Blend", "dairy", ["mexican cheese", "mexican blend cheese", "queso"], "cup"),
    IngredientSeed("Cottage Cheese", "dairy", ["small curd cottage cheese"], "cup"),

    # Pantry
    IngredientSeed("Olive Oil", "pantry", ["extra virgin olive oil", "evoo"], "tablespoon"),
    IngredientSeed("Vegetable Oil", "pantry", ["canola oil", "cooking oil"], "tablespoon"),
    IngredientSeed("Sesame Oil", "pantry", ["toasted sesame oil"], "tablespoon"),
    IngredientSeed("Ghee", "pantry", ["clarified butter"], "tablespoon"),
    IngredientSeed("Pork Fat", "pantry", ["lard", "rendered pork fat"], "tablespoon"),
    IngredientSeed("Chicken Broth", "pantry", ["chicken stock", "chicken bouillon"], "cup"),
    IngredientSeed("Beef Broth", "pantry", ["beef stock"], "cup"),
    IngredientSeed("Vegetable Broth", "pantry", ["vegetable stock"], "cup"),
    IngredientSeed("Water", "pantry", ["cold water", "warm water", "hot water"], "cup"),
    IngredientSeed("Soy Sauce", "pantry", ["shoyu", "tamari", "coconut aminos"], "tablespoon"),
    IngredientSeed("Fish Sauce", "pantry", ["nam pla", "nuoc mam"], "tablespoon"),
    IngredientSeed("Worcestershire Sauce", "pantry", ["worcestershire"], "tablespoon"),
    IngredientSeed("Hot Sauce", "pantry", ["tabasco"], "teaspoon"),
    IngredientSeed("Sriracha", "pantry", ["sriracha sauce", "red chili paste", "chili paste", "chile sauce", "chili sauce"], "tablespoon"),
    IngredientSeed("BBQ Sauce", "pantry", ["barbecue sauce", "bbq"], "cup"),
    IngredientSeed("Tomato Sauce", "pantry", ["marinara", "pasta sauce"], "cup"),
    IngredientSeed("Tomato Paste", "pantry", ["tomato puree"], "tablespoon"),
    IngredientSeed("Diced Tomatoes", "pantry", ["canned tomatoes", "crushed tomatoes", "stewed tomatoes"], "can"),
    IngredientSeed("Coconut Milk", "pantry", ["coconut cream"], "can"),
    IngredientSeed("Honey", "pantry", ["raw honey"], "tablespoon"),
    IngredientSeed("Maple Syrup", "pantry", ["pure maple syrup"], "tablespoon"),
    IngredientSeed("Vinegar", "pantry", ["white vinegar", "distilled vinegar", "rice vinegar", "rice wine vinegar"], "tablespoon"),
    IngredientSeed("Balsamic Vinegar", "pantry", ["balsamic"], "tablespoon"),
    IngredientSeed("Apple Cider Vinegar", "pantry", ["acv"], "tablespoon"),
    IngredientSeed("Sherry", "pantry", ["cooking sherry", "dry sherry"], "cup"),
    IngredientSeed("Rice Wine", "pantry", ["mirin", "sake", "shaoxing wine"], "tablespoon"),
    IngredientSeed("Dijon Mustard", "pantry", ["dijon"], "tablespoon"),
    IngredientSeed("Mayonnaise", "pantry", ["mayo", "paleo mayo", "avocado mayo"], "tablespoon"),
    IngredientSeed("Ketchup", "pantry", ["catsup", "tomato ketchup"], "tablespoon"),
    IngredientSeed("Guacamole", "pantry", ["guac"], "cup"),
    IngredientSeed("Peanut Butter", "pantry", ["creamy peanut butter", "chunky peanut butter"], "tablespoon"),
    IngredientSeed("Peanuts", "pantry", ["unsalted peanuts", "roasted peanuts"], "cup"),
    IngredientSeed("Sesame Seeds", "pantry", ["toasted sesame seeds", "white sesame seeds", "black sesame seeds"], "tablespoon"),
    IngredientSeed("Seaweed", "pantry", ["nori", "dried seaweed", "seasoned seaweed", "toasted seaweed"], "piece"),
    IngredientSeed("Gochujang", "pantry", ["korean chili paste", "gochujang paste"], "tablespoon"),
    IngredientSeed("Kimchi", "pantry", ["korean kimchi"], "cup"),
    IngredientSeed("Kombu", "pantry", ["kelp", "dried kombu"], "piece"),
    IngredientSeed("Bonito Flakes", "pantry", ["katsuobushi", "dried bonito"], "cup"),
    IngredientSeed("Star Anise", "pantry", ["whole star anise", "star anise pods"], "piece"),
    IngredientSeed("Chinese Five Spice", "pantry", ["chinese 5 spice", "five spice powder"], "teaspoon"),
    IngredientSeed("Pepita Seeds", "pantry", ["pumpkin seeds", "pepitas"], "cup"),
    IngredientSeed("Pretzels", "pantry", ["pretzel", "pretzel pieces"], "cup"),
    IngredientSeed("Sub Roll", "pantry", ["hoagie roll", "hero roll", "italian roll"], "piece"),
    IngredientSeed("Sourdough Starter", "pantry", ["starter", "sourdough starter discard", "active starter"], "cup"),
    IngredientSeed("Almonds", "pantry", ["sliced almonds", "slivered almonds", "almond"], "cup"),
    IngredientSeed("Walnuts", "pantry", ["walnut", "chopped walnuts"], "cup"),
    IngredientSeed("Cashews", "pantry", ["cashew", "roasted cashews"], "cup"),
    IngredientSeed("Pine Nuts", "pantry", ["pignoli", "pinon nuts"], "tablespoon"),
    IngredientSeed("Lemon Juice", "pantry", ["fresh lemon juice"], "tablespoon"),
    IngredientSeed("Lime Juice", "pantry", ["fresh lime juice"], "tablespoon"),
    IngredientSeed("Hoisin Sauce", "pantry", ["hoisin"], "tablespoon"),
    IngredientSeed("Buffalo Sauce", "pantry", ["buffalo wing sauce", "frank's red hot"], "cup"),
    IngredientSeed("Tabasco Sauce", "pantry", ["tabasco"], "teaspoon"),
    IngredientSeed("Sweet Chili Sauce", "pantry", ["sweet chili", "thai sweet chili sauce"], "tablespoon"),
    IngredientSeed("Red Curry Paste", "pantry", ["thai red curry paste", "curry paste"], "tablespoon"),
    IngredientSeed("Coconut Aminos", "pantry", ["coconut aminos or tamari", "tamari sauce"], "tablespoon"),
    IngredientSeed("Maggi Sauce", "pantry", ["maggi seasoning", "maggi"], "tablespoon"),
    IngredientSeed("Food Coloring", "pantry", ["soft pink food coloring", "red food coloring", "gel food coloring"], "drop"),
    IngredientSeed("Yellow Mustard", "pantry", ["regular mustard", "prepared mustard"], "tablespoon"),
    IngredientSeed("Cooking Spray", "pantry", ["non-stick cooking spray", "pam", "vegetable spray"], "piece"),
    IngredientSeed("Neutral Oil", "pantry", ["vegetable oil", "canola oil", "light flavored oil", "peanut oil"], "tablespoon"),
    IngredientSeed("Red Wine", "pantry", ["dry red wine", "cooking wine"], "cup"),
    IngredientSeed("White Wine", "pantry", ["dry white wine", "cooking white wine"], "cup"),
    IngredientSeed("Marsala Wine", "pantry", ["sweet marsala wine", "marsala"], "cup"),
    IngredientSeed("Refried Beans", "pantry", ["canned refried beans", "full-fat refried beans"], "can"),
    IngredientSeed("Enchilada Sauce", "pantry", ["green enchilada sauce", "red enchilada sauce", "green chile enchilada sauce"], "can"),
    IngredientSeed("Sofrito", "pantry", ["recaito"], "tablespoon"),
    IngredientSeed("Beef Bouillon", "pantry", ["beef bullion cube", "beef stock concentrate", "bouillon cube"], "piece"),
    IngredientSeed("Ice", "pantry", ["ice cubes", "crushed ice"], "cup"),
    IngredientSeed("Gelatin", "pantry", ["unflavored gelatin", "knox gelatin"], "packet"),

    # Grains & Pasta
    IngredientSeed("Rice", "grains", ["white rice", "long grain rice", "jasmine rice"], "cup"),
    IngredientSeed("Brown Rice", "grains", ["whole grain rice"], "cup"),
    IngredientSeed("Rice Noodles", "grains", ["rice noodle", "wide rice noodles", "pad thai noodles"], "oz"),
    IngredientSeed("Pasta", "grains", ["spaghetti", "penne", "linguine", "fettuccine", "elbow macaroni"], "oz"),
    IngredientSeed("Noodles", "grains", ["egg noodles", "lo mein noodles", "ramen noodles"], "oz"),
    IngredientSeed("Bread", "grains", ["white bread", "sandwich bread"], "slice"),
    IngredientSeed("Flour", "grains", ["all-purpose flour", "ap flour", "plain flour"], "cup"),
    IngredientSeed("Bread Crumbs", "grains", ["breadcrumbs", "panko"], "cup"),
    IngredientSeed("Oats", "grains", ["rolled oats", "oatmeal"], "cup"),
    IngredientSeed("Quinoa", "grains", [], "cup"),
    IngredientSeed("Tortilla", "grains", ["tortillas", "corn tortilla"], "piece"),
    IngredientSeed("Flour Tortillas", "grains", ["flour tortilla", "soft tortillas"], "piece"),
    IngredientSeed("Pie Crust", "grains", ["pie shell", "pastry crust", "9-inch pie crust"], "piece"),

    # Baking
    IngredientSeed("Granulated Sugar", "baking", ["sugar", "white sugar", "table sugar", "caster sugar"], "cup"),
    IngredientSeed("Coconut Sugar", "baking", ["coconut palm sugar"], "cup"),
    IngredientSeed("Brown Sugar", "baking", ["light brown sugar", "dark brown sugar"], "cup"),
    IngredientSeed("Powdered Sugar", "baking", ["confectioners sugar", "icing sugar"], "cup"),
    IngredientSeed("Baking Powder", "baking", [], "teaspoon"),
    IngredientSeed("Baking Soda", "baking", ["bicarbonate of soda"], "teaspoon"),
    IngredientSeed("Cream of Tartar", "baking", ["tartar"], "teaspoon"),
    IngredientSeed("Cornstarch", "baking", ["corn starch", "cornflour"], "tablespoon"),
    IngredientSeed("Vanilla Extract", "baking", ["vanilla", "pure vanilla"], "teaspoon"),
    IngredientSeed("Cocoa Powder", "baking", ["unsweetened cocoa"], "cup"),
    IngredientSeed("Chocolate Chips", "baking", ["semi-sweet chocolate chips"], "cup"),
    IngredientSeed("Yeast", "baking", ["active dry yeast", "instant yeast"], "packet"),

    # Spices
    IngredientSeed("Salt", "spices", ["table salt", "sea salt", "kosher salt", "garlic salt"], "teaspoon"),
    IngredientSeed("Black Pepper", "spices", ["pepper", "ground black pepper", "black peppercorns"], "teaspoon"),
    IngredientSeed("Paprika", "spices", ["sweet paprika", "smoked paprika", "hungarian paprika"], "teaspoon"),
    IngredientSeed("Cumin", "spices", ["ground cumin"], "teaspoon"),
    IngredientSeed("Chili Powder", "spices", ["chile powder", "ancho chili powder"], "teaspoon"),
    IngredientSeed("Oregano", "spices", ["dried oregano"], "teaspoon"),
    IngredientSeed("Basil", "spices", ["dried basil", "fresh basil"], "teaspoon"),
    IngredientSeed("Thyme", "spices", ["dried thyme", "fresh thyme"], "teaspoon"),
    IngredientSeed("Rosemary", "spices", ["dried rosemary", "fresh rosemary"], "teaspoon"),
    IngredientSeed("Sage", "spices", ["dried sage", "fresh sage", "sage leaves"], "teaspoon"),
    IngredientSeed("Cinnamon", "spices", ["ground cinnamon"], "teaspoon"),
    IngredientSeed("Nutmeg", "spices", ["ground nutmeg"], "teaspoon"),
    IngredientSeed("Cloves", "spices", ["whole cloves", "ground cloves"], "piece"),
    IngredientSeed("Allspice", "spices", ["ground allspice", "jamaican allspice", "whole allspice"], "teaspoon"),
    IngredientSeed("White Pepper", "spices", ["ground white pepper", "white peppercorns"], "teaspoon"),
    IngredientSeed("Fennel Seed", "spices", ["fennel seeds", "ground fennel", "ground fennel seeds"], "teaspoon"),
    IngredientSeed("Coriander", "spices", ["ground coriander", "coriander seed", "coriander seeds"], "teaspoon"),
    IngredientSeed("Fenugreek", "spices", ["fenugreek leaves", "dried fenugreek leaves", "methi"], "teaspoon"),
    IngredientSeed("Adobo Seasoning", "spices", ["adobo", "goya adobo"], "teaspoon"),
    IngredientSeed("Achiote", "spices", ["achiote powder", "annatto", "anatto paste", "achiote paste"], "tablespoon"),
    IngredientSeed("Sazon", "spices", ["sazon goya", "sazon seasoning", "sazon goya con culantro y achiote"], "packet"),
    IngredientSeed("MSG", "spices", ["monosodium glutamate", "accent seasoning"], "teaspoon"),
    IngredientSeed("Gumbo File", "spices", ["gumbo filé", "file powder", "sassafras"], "teaspoon"),
    IngredientSeed("Ancho Chile Powder", "spices", ["ancho chili powder", "ancho powder"], "teaspoon"),
    IngredientSeed("Dried Chili Flakes", "spices", ["dried red chili flakes", "chili flakes"], "teaspoon"),
    IngredientSeed("Cayenne", "spices", ["cayenne pepper", "ground cayenne"], "teaspoon"),
    IngredientSeed("Garlic Powder", "spices", ["granulated garlic"], "teaspoon"),
    IngredientSeed("Onion Powder", "spices", [], "teaspoon"),
    IngredientSeed("Italian Seasoning", "spices", ["italian herbs", "italian blend seasoning", "italian blend"], "teaspoon"),
    IngredientSeed("Mixed Herbs", "spices", ["herbs", "dried herbs", "herb blend"], "teaspoon"),
    IngredientSeed("Bay Leaf", "spices", ["bay leaves"], "piece"),
    IngredientSeed("Red Pepper Flakes", "spices", ["crushed red pepper", "chili flakes", "dried chili flakes", "red chili flakes", "dried red chili flakes"], "teaspoon"),
    IngredientSeed("Curry Powder", "spices", ["curry"], "teaspoon"),
    IngredientSeed("Garam Masala", "spices", [], "teaspoon"),
    IngredientSeed("Turmeric", "spices", ["ground turmeric"], "teaspoon"),
    IngredientSeed("Cilantro", "spices", ["fresh cilantro", "coriander leaves"], "cup"),
    IngredientSeed("Parsley", "spices", ["fresh parsley", "flat leaf parsley", "flat parsley"], "cup"),
    IngredientSeed("Dill", "spices", ["fresh dill", "dill weed"], "tablespoon"),
    IngredientSeed("Mint", "spices", ["fresh mint", "mint leaves"], "cup"),

    # Seasoning Mixes
    IngredientSeed("Cajun Seasoning", "spices", ["cajun spice", "creole seasoning"], "teaspoon"),
    IngredientSeed("Taco Seasoning", "spices", ["taco spice mix", "taco seasoning mix"], "packet"),
    IngredientSeed("Ranch Dressing Mix", "spices", ["ranch seasoning", "ranch mix", "ranch packet"], "packet"),
    IngredientSeed("Au Jus Gravy Mix", "spices", ["au jus mix", "beef gravy mix"], "packet"),
    IngredientSeed("Onion Soup Mix", "spices", ["onion soup packet", "lipton onion soup mix"], "packet"),
    IngredientSeed("Herbes de Provence", "spices", ["herbs de provence", "provence herbs"], "teaspoon"),
    IngredientSeed("Jerk Seasoning", "spices", ["jamaican jerk", "jerk spice"], "tablespoon"),
    IngredientSeed("Sweet Rub", "spices", ["bbq rub", "dry rub", "rub"], "tablespoon"),
]

UNIT_SEEDS: list[UnitSeed] = [
    # Volume - metric base: ml
    UnitSeed("milliliter", "volume", abbreviation="ml", aliases=["milliliters"], base_unit="ml", conversion_to_base=1),
    UnitSeed("liter", "volume", abbreviation="l", aliases=["liters", "litre", "litres"], base_unit="ml", conversion_to_base=1000),
    UnitSeed("teaspoon", "volume", abbreviation="tsp", aliases=["teaspoons", "tsps"], base_unit="ml", conversion_to_base=4.929),
    UnitSeed("tablespoon", "volume", abbreviation="tbsp", aliases=["tablespoons", "tbsps", "tbl"], base_unit="ml", conversion_to_base=14.787),
    UnitSeed("cup", "volume", abbreviation="c", aliases=["cups"], base_unit="ml", conversion_to_base=236.588),
    UnitSeed("fluid ounce", "volume", abbreviation="fl oz", aliases=["fluid ounces", "fl. oz."], base_unit="ml", conversion_to_base=29.574),
    UnitSeed("pint", "volume", abbreviation="pt", aliases=["pints"], base_unit="ml", conversion_to_base=473.176),
    UnitSeed("quart", "volume", abbreviation="qt", aliases=["quarts"], base_unit="ml", conversion_to_base=946.353),
    UnitSeed("gallon", "volume", abbreviation="gal", aliases=["gallons"], base_unit="ml", conversion_to_base=3785.41),

    # Weight - metric base: g
    UnitSeed("gram", "weight", abbreviation="g", aliases=["grams", "gm"], base_unit="g", conversion_to_base=1),
    UnitSeed("kilogram", "weight", abbreviation="kg", aliases=["kilograms", "kilo"], base_unit="g", conversion_to_base=1000),
    UnitSeed("milligram", "weight", abbreviation="mg", aliases=["milligrams"], base_unit="g", conversion_to_base=0.001),
    UnitSeed("ounce", "weight", abbreviation="oz", aliases=["ounces"], base_unit="g", conversion_to_base=28.3495),
    UnitSeed("pound", "weight", abbreviation="lb", aliases=["pounds", "lbs"], base_unit="g", conversion_to_base=453.592),

    # Count
    UnitSeed("piece", "count", abbreviation="pc", aliases=["pieces", "pcs", "whole", "item", "items"]),
    UnitSeed("slice", "count", aliases=["slices"]),
    UnitSeed("clove", "count", aliases=["cloves"]),
    UnitSeed("sprig", "count", aliases=["sprigs"]),
    UnitSeed("bunch", "count", aliases=["bunches"]),
    UnitSeed("head", "count", aliases=["heads"]),
    UnitSeed("stalk", "count", aliases=["stalks"]),
    UnitSeed("can", "count", aliases=["cans", "tin", "tins"]),
    UnitSeed("package", "count", abbreviation="pkg", aliases=["packages", "pack", "packs", "packet", "packets"]),
    UnitSeed("jar", "count", aliases=["jars"]),
    UnitSeed("bottle", "count", aliases=["bottles"]),
    UnitSeed("bag", "count", aliases=["bags"]),
    UnitSeed("box", "count", aliases=["boxes"]),
    UnitSeed("stick", "count", aliases=["sticks"]),
    UnitSeed("sheet", "count", aliases=["sheets"]),
    UnitSeed("leaf", "count", aliases=["leaves"]),
    UnitSeed("strip", "count", aliases=["strips"]),
    UnitSeed("fillet", "count", aliases=["fillets", "filet", "filets"]),
    UnitSeed("breast", "count", aliases=["breasts"]),
    UnitSeed("thigh", "count", aliases=["thighs"]),
    UnitSeed("leg", "count", aliases=["legs"]),
    UnitSeed("wing", "count", aliases=["wings"]),
    UnitSeed("rib", "count", aliases=["ribs"]),
    UnitSeed("ear", "count", aliases=["ears"]),
    UnitSeed("drop", "count", aliases=["drops"]),
    UnitSeed("dash", "count", aliases=["dashes"]),
    UnitSeed("pinch", "count", aliases=["pinches"]),
    UnitSeed("handful", "count", aliases=["handfuls"]),

    # Length
    UnitSeed("inch", "length", abbreviation="in", aliases=["inches", '"']),
    UnitSeed("centimeter", "length", abbreviation="cm", aliases=["centimeters"]),
]

MODIFIER_SEEDS: list[ModifierSeed] = [
    # Preparation
    ModifierSeed("chopped", "preparation", ["chop"]),
    ModifierSeed("diced", "preparation", ["dice", "cubed"]),
    ModifierSeed("minced", "preparation", ["mince", "finely chopped"]),
    ModifierSeed("sliced", "preparation", ["slice"]),
    ModifierSeed("julienned", "preparation", ["julienne", "matchstick"]),
    ModifierSeed("grated", "preparation", ["shredded", "shred"]),
    ModifierSeed("mashed", "preparation", ["mash"]),
    ModifierSeed("crushed", "preparation", ["crush"]),
    ModifierSeed("halved", "preparation", ["halve", "cut in half"]),
    ModifierSeed("quartered", "preparation", ["quarter"]),
    ModifierSeed("cubed", "preparation", ["cube", "cut into cubes"]),
    ModifierSeed("peeled", "preparation", ["peel"]),
    ModifierSeed("seeded", "preparation", ["seed", "deseeded"]),
    ModifierSeed("cored", "preparation", ["core"]),
    ModifierSeed("trimmed", "preparation", ["trim"]),
    ModifierSeed("zested", "preparation", ["zest"]),
    ModifierSeed("juiced", "preparation", ["juice"]),
    ModifierSeed("beaten", "preparation", ["beat", "whisked"]),
    ModifierSeed("sifted", "preparation", ["sift"]),
    ModifierSeed("packed", "preparation", ["firmly packed"]),

    # State
    ModifierSeed("fresh", "state", []),
    ModifierSeed("frozen", "state", ["freeze"]),
    ModifierSeed("dried", "state", ["dry", "dehydrated"]),
    ModifierSeed("canned", "state", ["tinned"]),
    ModifierSeed("jarred", "state", []),
    ModifierSeed("thawed", "state", ["defrosted"]),
    ModifierSeed("room temperature", "state", ["at room temperature", "room temp"]),
    ModifierSeed("chilled", "state", ["cold", "refrigerated"]),
    ModifierSeed("softened", "state", ["soft"]),
    ModifierSeed("melted", "state", ["melt"]),
    ModifierSeed("warm", "state", ["warmed", "lukewarm"]),
    ModifierSeed("hot", "state", ["heated"]),

    # Quality
    ModifierSeed("boneless", "quality", ["bone-free"]),
    ModifierSeed("skinless", "quality", ["skin-free"]),
    ModifierSeed("bone-in", "quality", ["with bone"]),
    ModifierSeed("skin-on", "quality", ["with skin"]),
    ModifierSeed("lean", "quality", []),
    ModifierSeed("fat-free", "quality", ["non-fat", "nonfat"]),
    ModifierSeed("low-fat", "quality", ["reduced fat"]),
    ModifierSeed("whole", "quality", ["whole grain", "whole wheat"]),
    ModifierSeed("organic", "quality", []),
    ModifierSeed("unsalted", "quality", ["salt-free"]),
    ModifierSeed("salted", "quality", ["with salt"]),
    ModifierSeed("unsweetened", "quality", ["no sugar added"]),
    ModifierSeed("sweetened", "quality", []),
    ModifierSeed("ripe", "quality", ["ripened"]),
    ModifierSeed("unripe", "quality", ["green"]),
    ModifierSeed("seedless", "quality", []),
    ModifierSeed("pitted", "quality", []),
    ModifierSeed("extra-virgin", "quality", ["extra virgin"]),

    # Size
    ModifierSeed("large", "size", ["lg"]),
    ModifierSeed("medium", "size", ["med"]),
    ModifierSeed("small", "size", ["sm"]),
    ModifierSeed("extra-large", "size", ["xl", "jumbo"]),
    ModifierSeed("thick", "size", ["thickly"]),
    ModifierSeed("thin", "size", ["thinly"]),
    ModifierSeed("bite-sized", "size", ["bite-size", "bite size"]),

    # Cooking
    ModifierSeed("cooked", "cooking", ["cook"]),
    ModifierSeed("raw", "cooking", ["uncooked"]),
    ModifierSeed("roasted", "cooking", ["roast"]),
    ModifierSeed("toasted", "cooking", ["toast"]),
    ModifierSeed("fried", "cooking", ["fry", "pan-fried"]),
    ModifierSeed("grilled", "cooking", ["grill", "charred"]),
    ModifierSeed("baked", "cooking", ["bake"]),
    ModifierSeed("steamed", "cooking", ["steam"]),
    ModifierSeed("boiled", "cooking", ["boil"]),
    ModifierSeed("blanched", "cooking", ["blanch"]),
    ModifierSeed("poached", "cooking", ["poach"]),
    ModifierSeed("sautéed", "cooking", ["saute", "sauteed"]),
    ModifierSeed("braised", "cooking", ["braise"]),
    ModifierSeed("smoked", "cooking", ["smoke"]),
    ModifierSeed("caramelized", "cooking", ["caramelize"]),
    ModifierSeed("browned", "cooking", ["brown"]),
]
# fmt: on

from typing import Final, Tuple

CATEGORIES: Final[Tuple[str, ...]] = ("breakfast", "lunch", "dinner")
WEEK_DAYS: Final[Tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)

# User-facing messages (the CLI protocol relies on these exact strings)
MENU_PROMPT: Final[str] = "What would you like to do (add, show, plan, save, exit)?"
ADD_CATEGORY_PROMPT: Final[str] = "Which meal do you want to add (breakfast, lunch, dinner)?"
SHOW_CATEGORY_PROMPT: Final[str] = "Which category do you want to print (breakfast, lunch, dinner)?"
MEAL_NAME_PROMPT: Final[str] = "Input the meal's name:"
INGREDIENTS_PROMPT: Final[str] = "Input the ingredients:"
FILENAME_PROMPT: Final[str] = "Input a filename:"
WRONG_CATEGORY: Final[str] = "Wrong meal category! Choose from: breakfast, lunch, dinner."
WRONG_FORMAT: Final[str] = "Wrong format. Use letters only!"
MEAL_NOT_IN_LIST: Final[str] = "This meal doesn’t exist. Choose a meal from the list above."
MEAL_ADDED: Final[str] = "The meal has been added!"
NO_MEALS_FOUND: Final[str] = "No meals found."
UNABLE_TO_SAVE: Final[str] = "Unable to save. Plan your meals first."
UNABLE_TO_PLAN: Final[str] = "Unable to plan. Add at least one meal to every category first."
SAVED: Final[str] = "Saved!"
BYE: Final[str] = "Bye!"

"""
Commands, button labels and texts shown to operators.
"""

# Commands
CMD_SKIP = "/skip"

# Date buttons
TODAY_LABEL = "Сегодня"
YESTERDAY_LABEL = "Вчера"


WELCOME_MESSAGE = """Добро пожаловать в журнал забивки свай!

Используйте команды:
/newrecord - начать новую запись
/help - помощь"""


HELP_MESSAGE = """Команды бота:
/newrecord - начать новую запись о забивке сваи
/cancel - отменить текущую запись
/help - показать эту справку

При вводе имени оператора и примечания можно отправить /skip, чтобы пропустить поле."""


IDLE_MESSAGE = "Используйте /newrecord для начала новой записи или /help для справки."

CANCELLED_MESSAGE = "Запись отменена. Используйте /newrecord, чтобы начать заново."

NOTHING_TO_CANCEL_MESSAGE = "Нет активной записи."

NON_TEXT_MESSAGE = "Пожалуйста, отправьте текстовое сообщение."


# Pile selection
NO_PILES_MESSAGE = "Нет доступных свай для забивки."
PILES_UNAVAILABLE_MESSAGE = "Не удалось получить список свай с сервера. Попробуйте позже."
SELECT_GROUP_PROMPT = "Выберите группу свай:"
SELECT_PILE_PROMPT = "Выберите номер сваи:"
INVALID_GROUP_MESSAGE = "Неверный выбор группы. Попробуйте еще раз."
INVALID_PILE_MESSAGE = "Неверный номер сваи. Пожалуйста, выберите из предложенных вариантов."

# Date
SELECT_DATE_PROMPT = "Выберите дату забивки:"

# Elevation
ELEVATION_PROMPT = (
    "Выбрана дата: {date}\n"
    "Введите отметку верха головы сваи (в миллиметрах, например, 12750):"
)

# Optional fields
OPERATOR_PROMPT = "Введите имя оператора (или /skip чтобы пропустить):"
NOTES_PROMPT = "Введите дополнительную информацию (или /skip чтобы пропустить):"

# Submission
SUBMIT_SUCCESS_MESSAGE = "Данные успешно отправлены!\n\n{summary}"
SUBMIT_ERROR_MESSAGE = "Сервер вернул ошибку: {error}"
SUBMIT_TRANSPORT_ERROR_MESSAGE = "Ошибка при отправке данных на сервер: {error}"
UNEXPECTED_ERROR_MESSAGE = "Произошла ошибка. Запись сброшена, начните заново: /newrecord"

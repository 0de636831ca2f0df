"""
Interface strings shown by the onboarding wizard and its host.

Placeholders use str.format syntax ({count}, {name}); the resolver
interpolates them.
"""

UI_STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "common.back": "Back",
        "common.next": "Next",
        "common.get_started": "Get Started",
        "common.skip": "Skip",
        "common.setup": "Setup",
        "common.cancel": "Cancel",

        "onboarding.progress": "{current}/{total}",
        "onboarding.language.title": "Choose your language 🌍",
        "onboarding.language.subtitle": "This is how ANITA will speak to you 🗣️",
        "onboarding.name.title": "What should I call you? 👋",
        "onboarding.name.subtitle": "Just a first name is perfect",
        "onboarding.name.placeholder": "Your name",
        "onboarding.name.greeting": "Nice to meet you, {name}!",
        "onboarding.currency.title": "Choose your currency 💱",
        "onboarding.currency.subtitle": "We’ll use it to format money everywhere",

        "chat.conversations": "Conversations ({count})",
    },
    "de": {
        "common.back": "Zurück",
        "common.next": "Weiter",
        "common.get_started": "Los geht’s",
        "common.skip": "Überspringen",
        "common.setup": "Setup",
        "common.cancel": "Abbrechen",

        "onboarding.language.title": "Sprache wählen 🌍",
        "onboarding.language.subtitle": "So spricht ANITA mit dir 🗣️",
        "onboarding.name.title": "Wie soll ich dich nennen? 👋",
        "onboarding.name.subtitle": "Ein Vorname reicht völlig",
        "onboarding.name.placeholder": "Dein Name",
        "onboarding.name.greeting": "Schön, dich kennenzulernen, {name}!",
        "onboarding.currency.title": "Wähle deine Währung 💱",
        "onboarding.currency.subtitle": "So formatiere ich Geldbeträge für dich",

        "chat.conversations": "Unterhaltungen ({count})",
    },
    "fr": {
        "common.back": "Retour",
        "common.next": "Suivant",
        "common.get_started": "Commencer",
        "common.skip": "Passer",
        "common.setup": "Configuration",
        "common.cancel": "Annuler",

        "onboarding.language.title": "Choisis ta langue 🌍",
        "onboarding.language.subtitle": "C’est ainsi qu’ANITA te parlera 🗣️",
        "onboarding.name.title": "Comment dois-je t’appeler? 👋",
        "onboarding.name.subtitle": "Un prénom suffit",
        "onboarding.name.placeholder": "Ton prénom",
        "onboarding.name.greeting": "Ravie de te rencontrer, {name}!",
        "onboarding.currency.title": "Choisis ta devise 💱",
        "onboarding.currency.subtitle": "Je l’utiliserai pour formater les montants",

        "chat.conversations": "Conversations ({count})",
    },
    "es": {
        "common.back": "Atrás",
        "common.next": "Siguiente",
        "common.get_started": "Empezar",
        "common.skip": "Saltar",
        "common.setup": "Setup",
        "common.cancel": "Cancelar",

        "onboarding.language.title": "Elige tu idioma 🌍",
        "onboarding.language.subtitle": "Así te hablará ANITA 🗣️",
        "onboarding.name.title": "¿Cómo quieres que te llame? 👋",
        "onboarding.name.subtitle": "Con tu nombre de pila basta",
        "onboarding.name.placeholder": "Tu nombre",
        "onboarding.name.greeting": "¡Encantada de conocerte, {name}!",
        "onboarding.currency.title": "Elige tu moneda 💱",
        "onboarding.currency.subtitle": "La usaré para dar formato al dinero",

        "chat.conversations": "Conversaciones ({count})",
    },
    "it": {
        "common.back": "Indietro",
        "common.next": "Avanti",
        "common.get_started": "Inizia",
        "common.skip": "Salta",
        "common.setup": "Setup",
        "common.cancel": "Annulla",

        "onboarding.language.title": "Scegli la lingua 🌍",
        "onboarding.language.subtitle": "Così ANITA parlerà con te 🗣️",
        "onboarding.name.title": "Come posso chiamarti? 👋",
        "onboarding.name.subtitle": "Basta il nome",
        "onboarding.name.placeholder": "Il tuo nome",
        "onboarding.name.greeting": "Piacere di conoscerti, {name}!",
        "onboarding.currency.title": "Scegli la valuta 💱",
        "onboarding.currency.subtitle": "La userò per formattare gli importi",

        "chat.conversations": "Conversazioni ({count})",
    },
    "pl": {
        "common.back": "Wstecz",
        "common.next": "Dalej",
        "common.get_started": "Zaczynajmy",
        "common.skip": "Pomiń",
        "common.setup": "Ustawienia",
        "common.cancel": "Anuluj",

        "onboarding.language.title": "Wybierz język 🌍",
        "onboarding.language.subtitle": "Tak ANITA będzie z Tobą rozmawiać 🗣️",
        "onboarding.name.title": "Jak mam się do Ciebie zwracać? 👋",
        "onboarding.name.subtitle": "Wystarczy samo imię",
        "onboarding.name.placeholder": "Twoje imię",
        "onboarding.name.greeting": "Miło Cię poznać, {name}!",
        "onboarding.currency.title": "Wybierz walutę 💱",
        "onboarding.currency.subtitle": "Użyję jej do formatowania kwot",

        "chat.conversations": "Rozmowy ({count})",
    },
    "tr": {
        "common.back": "Geri",
        "common.next": "İleri",
        "common.get_started": "Başla",
        "common.skip": "Atla",
        "common.setup": "Kurulum",
        "common.cancel": "İptal",

        "onboarding.language.title": "Dilini seç 🌍",
        "onboarding.language.subtitle": "ANITA seninle böyle konuşacak 🗣️",
        "onboarding.name.title": "Sana nasıl hitap edeyim? 👋",
        "onboarding.name.subtitle": "Sadece adın yeterli",
        "onboarding.name.placeholder": "Adın",
        "onboarding.name.greeting": "Tanıştığıma memnun oldum, {name}!",
        "onboarding.currency.title": "Para birimini seç 💱",
        "onboarding.currency.subtitle": "Tutarları bu para birimiyle göstereceğim",

        "chat.conversations": "Sohbetler ({count})",
    },
    "ru": {
        "common.back": "Назад",
        "common.next": "Далее",
        "common.get_started": "Начать",
        "common.skip": "Пропустить",
        "common.setup": "Setup",
        "common.cancel": "Отмена",

        "onboarding.language.title": "Выбери язык 🌍",
        "onboarding.language.subtitle": "Так ANITA будет общаться с тобой 🗣️",
        "onboarding.name.title": "Как к тебе обращаться? 👋",
        "onboarding.name.subtitle": "Достаточно только имени",
        "onboarding.name.placeholder": "Твоё имя",
        "onboarding.name.greeting": "Приятно познакомиться, {name}!",
        "onboarding.currency.title": "Выбери валюту 💱",
        "onboarding.currency.subtitle": "Я буду использовать её для форматирования сумм",

        "chat.conversations": "Диалоги ({count})",
    },
    "uk": {
        "common.back": "Назад",
        "common.next": "Далі",
        "common.get_started": "Почати",
        "common.skip": "Пропустити",
        "common.setup": "Setup",
        "common.cancel": "Скасувати",

        "onboarding.language.title": "Обери мову 🌍",
        "onboarding.language.subtitle": "Так ANITA спілкуватиметься з тобою 🗣️",
        "onboarding.name.title": "Як до тебе звертатися? 👋",
        "onboarding.name.subtitle": "Достатньо лише імені",
        "onboarding.name.placeholder": "Твоє ім’я",
        "onboarding.name.greeting": "Приємно познайомитися, {name}!",
        "onboarding.currency.title": "Обери валюту 💱",
        "onboarding.currency.subtitle": "Я використаю її для форматування сум",

        "chat.conversations": "Розмови ({count})",
    },
}

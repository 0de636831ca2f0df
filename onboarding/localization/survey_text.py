"""Question titles, subtitles and option labels for the onboarding survey."""

# Appended to every question title, with a leading space
QUESTION_EMOJI: dict[str, str] = {
    "goal": "🎯",
    "help_first": "🤝",
    "tracking_today": "🧾",
    "situation": "🧭",
    "challenge": "💪",
}

SURVEY_TEXT: dict[str, dict[str, str]] = {
    "en": {
        "question.goal.title": "What’s your #1 money goal right now?",
        "question.help_first.title": "What do you want help with first?",
        "question.tracking_today.title": "How do you track your money today?",
        "question.situation.title": "Which best describes your situation?",
        "question.challenge.title": "What’s the hardest part about money for you?",
        "question.goal.subtitle": "So ANITA can personalize your plan ✨",
        "question.challenge.subtitle": "Pick one — we’ll adapt 💡",

        "option.goal.save_more": "Save more",
        "option.goal.pay_debt": "Pay off debt",
        "option.goal.emergency_fund": "Build an emergency fund",
        "option.goal.start_investing": "Start investing",
        "option.goal.stop_overspending": "Stop overspending",
        "option.goal.big_purchase": "Plan for a big purchase",
        "option.help_first.budgeting": "Budgeting",
        "option.help_first.expense_tracking": "Tracking expenses",
        "option.help_first.debt_strategy": "Debt payoff strategy",
        "option.help_first.income_growth": "Increasing income",
        "option.help_first.investing_basics": "Investing basics",
        "option.help_first.goal_planning": "Saving for goals",
        "option.tracking_today.not_tracking": "I don’t track it",
        "option.tracking_today.mental_notes": "In my head / notes",
        "option.tracking_today.spreadsheet": "Spreadsheet",
        "option.tracking_today.bank_app": "Bank app",
        "option.tracking_today.budget_app": "Budgeting app",
        "option.tracking_today.other": "Other",
        "option.situation.paycheck_to_paycheck": "Paycheck-to-paycheck",
        "option.situation.some_savings": "I have some savings",
        "option.situation.stable": "Mostly stable",
        "option.situation.debt_heavy": "Debt feels heavy",
        "option.situation.building_wealth": "Building wealth",
        "option.situation.prefer_not_say": "Prefer not to say",
        "option.challenge.impulse_spending": "Impulse spending",
        "option.challenge.no_budget": "No clear budget",
        "option.challenge.debt_stress": "Debt payments",
        "option.challenge.irregular_income": "Irregular income",
        "option.challenge.saving_consistency": "Saving consistently",
        "option.challenge.investing_confusion": "Understanding investing",
    },
    "de": {
        "question.goal.title": "Was ist dein wichtigstes Geldziel gerade?",
        "question.help_first.title": "Wobei soll ich dir zuerst helfen?",
        "question.tracking_today.title": "Wie behältst du heute deine Finanzen im Blick?",
        "question.situation.title": "Welche Situation passt am besten zu dir?",
        "question.challenge.title": "Was ist für dich am schwierigsten bei Geld?",
        "question.goal.subtitle": "Damit ANITA deinen Plan personalisieren kann ✨",
        "question.challenge.subtitle": "Wähle eins — ich passe mich an 💡",

        "option.goal.save_more": "Mehr sparen",
        "option.goal.pay_debt": "Schulden abbauen",
        "option.goal.emergency_fund": "Notgroschen aufbauen",
        "option.goal.start_investing": "Mit dem Investieren anfangen",
        "option.goal.stop_overspending": "Weniger impulsiv ausgeben",
        "option.goal.big_purchase": "Für einen großen Kauf planen",
        "option.help_first.budgeting": "Budget erstellen",
        "option.help_first.expense_tracking": "Ausgaben tracken",
        "option.help_first.debt_strategy": "Schulden-Strategie",
        "option.help_first.income_growth": "Einkommen steigern",
        "option.help_first.investing_basics": "Investieren (Basics)",
        "option.help_first.goal_planning": "Für Ziele sparen",
        "option.tracking_today.not_tracking": "Ich tracke nicht",
        "option.tracking_today.mental_notes": "Im Kopf / Notizen",
        "option.tracking_today.spreadsheet": "Spreadsheet",
        "option.tracking_today.bank_app": "Bank-App",
        "option.tracking_today.budget_app": "Budget-App",
        "option.tracking_today.other": "Etwas anderes",
        "option.situation.paycheck_to_paycheck": "Von Gehalt zu Gehalt",
        "option.situation.some_savings": "Ich habe etwas Erspartes",
        "option.situation.stable": "Meistens stabil",
        "option.situation.debt_heavy": "Schulden drücken",
        "option.situation.building_wealth": "Vermögen aufbauen",
        "option.situation.prefer_not_say": "Lieber nicht sagen",
        "option.challenge.impulse_spending": "Impulskäufe",
        "option.challenge.no_budget": "Kein klares Budget",
        "option.challenge.debt_stress": "Schuldenraten",
        "option.challenge.irregular_income": "Unregelmäßiges Einkommen",
        "option.challenge.saving_consistency": "Konsequent sparen",
        "option.challenge.investing_confusion": "Investieren verstehen",
    },
    "fr": {
        "question.goal.title": "Quel est ton objectif financier #1 en ce moment?",
        "question.help_first.title": "Sur quoi veux-tu de l’aide en premier?",
        "question.tracking_today.title": "Comment suis-tu tes finances aujourd’hui?",
        "question.situation.title": "Laquelle décrit le mieux ta situation?",
        "question.challenge.title": "Qu’est-ce qui est le plus difficile avec l’argent pour toi?",
        "question.goal.subtitle": "Pour qu’ANITA puisse personnaliser ton plan ✨",
        "question.challenge.subtitle": "Choisis-en une — on s’adapte 💡",

        "option.goal.save_more": "Épargner davantage",
        "option.goal.pay_debt": "Rembourser mes dettes",
        "option.goal.emergency_fund": "Constituer une épargne de secours",
        "option.goal.start_investing": "Commencer à investir",
        "option.goal.stop_overspending": "Arrêter de trop dépenser",
        "option.goal.big_purchase": "Préparer un gros achat",
        "option.help_first.budgeting": "Budget",
        "option.help_first.expense_tracking": "Suivi des dépenses",
        "option.help_first.debt_strategy": "Stratégie de remboursement",
        "option.help_first.income_growth": "Augmenter mes revenus",
        "option.help_first.investing_basics": "Bases de l’investissement",
        "option.help_first.goal_planning": "Épargner pour des objectifs",
        "option.tracking_today.not_tracking": "Je ne suis pas",
        "option.tracking_today.mental_notes": "Dans ma tête / notes",
        "option.tracking_today.spreadsheet": "Tableur",
        "option.tracking_today.bank_app": "Appli bancaire",
        "option.tracking_today.budget_app": "Appli de budget",
        "option.tracking_today.other": "Autre",
        "option.situation.paycheck_to_paycheck": "De paie en paie",
        "option.situation.some_savings": "J’ai un peu d’épargne",
        "option.situation.stable": "Plutôt stable",
        "option.situation.debt_heavy": "Les dettes pèsent",
        "option.situation.building_wealth": "Je construis mon patrimoine",
        "option.situation.prefer_not_say": "Je préfère ne pas dire",
        "option.challenge.impulse_spending": "Dépenses impulsives",
        "option.challenge.no_budget": "Pas de budget clair",
        "option.challenge.debt_stress": "Remboursements",
        "option.challenge.irregular_income": "Revenus irréguliers",
        "option.challenge.saving_consistency": "Épargner régulièrement",
        "option.challenge.investing_confusion": "Comprendre l’investissement",
    },
    "es": {
        "question.goal.title": "¿Cuál es tu objetivo #1 con el dinero ahora?",
        "question.help_first.title": "¿Con qué quieres ayuda primero?",
        "question.tracking_today.title": "¿Cómo llevas tus finanzas hoy?",
        "question.situation.title": "¿Cuál describe mejor tu situación?",
        "question.challenge.title": "¿Qué es lo más difícil del dinero para ti?",
        "question.goal.subtitle": "Para que ANITA personalice tu plan ✨",
        "question.challenge.subtitle": "Elige una — me adapto 💡",

        "option.goal.save_more": "Ahorrar más",
        "option.goal.pay_debt": "Pagar deudas",
        "option.goal.emergency_fund": "Fondo de emergencia",
        "option.goal.start_investing": "Empezar a invertir",
        "option.goal.stop_overspending": "Gastar menos",
        "option.goal.big_purchase": "Planear una compra grande",
        "option.help_first.budgeting": "Presupuesto",
        "option.help_first.expense_tracking": "Registrar gastos",
        "option.help_first.debt_strategy": "Estrategia de deudas",
        "option.help_first.income_growth": "Aumentar ingresos",
        "option.help_first.investing_basics": "Invertir (básico)",
        "option.help_first.goal_planning": "Ahorrar para metas",
        "option.tracking_today.not_tracking": "No lo llevo",
        "option.tracking_today.mental_notes": "En mi cabeza / notas",
        "option.tracking_today.spreadsheet": "Hoja de cálculo",
        "option.tracking_today.bank_app": "App del banco",
        "option.tracking_today.budget_app": "App de presupuesto",
        "option.tracking_today.other": "Otro",
        "option.situation.paycheck_to_paycheck": "De sueldo en sueldo",
        "option.situation.some_savings": "Tengo algunos ahorros",
        "option.situation.stable": "Bastante estable",
        "option.situation.debt_heavy": "Las deudas pesan",
        "option.situation.building_wealth": "Construyendo patrimonio",
        "option.situation.prefer_not_say": "Prefiero no decirlo",
        "option.challenge.impulse_spending": "Gasto impulsivo",
        "option.challenge.no_budget": "Sin presupuesto claro",
        "option.challenge.debt_stress": "Pagos de deuda",
        "option.challenge.irregular_income": "Ingresos irregulares",
        "option.challenge.saving_consistency": "Ahorrar con constancia",
        "option.challenge.investing_confusion": "Entender inversión",
    },
    "it": {
        "question.goal.title": "Qual è il tuo obiettivo #1 con i soldi ora?",
        "question.help_first.title": "Su cosa vuoi aiuto per primo?",
        "question.tracking_today.title": "Come tieni traccia dei soldi oggi?",
        "question.situation.title": "Quale descrive meglio la tua situazione?",
        "question.challenge.title": "Qual è la parte più difficile dei soldi per te?",
        "question.goal.subtitle": "Così ANITA può personalizzare il tuo piano ✨",
        "question.challenge.subtitle": "Scegline una — mi adatto 💡",

        "option.goal.save_more": "Risparmiare di più",
        "option.goal.pay_debt": "Ripagare debiti",
        "option.goal.emergency_fund": "Fondo d’emergenza",
        "option.goal.start_investing": "Iniziare a investire",
        "option.goal.stop_overspending": "Spendere meno",
        "option.goal.big_purchase": "Pianificare un grande acquisto",
        "option.help_first.budgeting": "Budget",
        "option.help_first.expense_tracking": "Tracciare spese",
        "option.help_first.debt_strategy": "Strategia debiti",
        "option.help_first.income_growth": "Aumentare il reddito",
        "option.help_first.investing_basics": "Investire (base)",
        "option.help_first.goal_planning": "Risparmiare per obiettivi",
        "option.tracking_today.not_tracking": "Non traccio",
        "option.tracking_today.mental_notes": "A mente / note",
        "option.tracking_today.spreadsheet": "Foglio di calcolo",
        "option.tracking_today.bank_app": "App banca",
        "option.tracking_today.budget_app": "App budget",
        "option.tracking_today.other": "Altro",
        "option.situation.paycheck_to_paycheck": "Da stipendio a stipendio",
        "option.situation.some_savings": "Ho qualche risparmio",
        "option.situation.stable": "Abbastanza stabile",
        "option.situation.debt_heavy": "Debiti pesanti",
        "option.situation.building_wealth": "Costruire patrimonio",
        "option.situation.prefer_not_say": "Preferisco non dirlo",
        "option.challenge.impulse_spending": "Spese impulsive",
        "option.challenge.no_budget": "Nessun budget chiaro",
        "option.challenge.debt_stress": "Rate dei debiti",
        "option.challenge.irregular_income": "Reddito irregolare",
        "option.challenge.saving_consistency": "Risparmiare con costanza",
        "option.challenge.investing_confusion": "Capire gli investimenti",
    },
    "pl": {
        "question.goal.title": "Jaki jest twój najważniejszy cel finansowy teraz?",
        "question.help_first.title": "W czym chcesz pomocy najpierw?",
        "question.tracking_today.title": "Jak dziś śledzisz swoje finanse?",
        "question.situation.title": "Które najlepiej opisuje twoją sytuację?",
        "question.challenge.title": "Co jest dla ciebie najtrudniejsze w kwestii pieniędzy?",
        "question.goal.subtitle": "Żeby ANITA mogła spersonalizować twój plan ✨",
        "question.challenge.subtitle": "Wybierz jedną — dostosujemy się 💡",

        "option.goal.save_more": "Więcej oszczędzać",
        "option.goal.pay_debt": "Spłacić długi",
        "option.goal.emergency_fund": "Zbudować poduszkę finansową",
        "option.goal.start_investing": "Zacząć inwestować",
        "option.goal.stop_overspending": "Przestać wydawać za dużo",
        "option.goal.big_purchase": "Zaplanować duży zakup",
        "option.help_first.budgeting": "Budżetowanie",
        "option.help_first.expense_tracking": "Śledzenie wydatków",
        "option.help_first.debt_strategy": "Strategia spłaty długów",
        "option.help_first.income_growth": "Zwiększenie dochodów",
        "option.help_first.investing_basics": "Podstawy inwestowania",
        "option.help_first.goal_planning": "Oszczędzanie na cele",
        "option.tracking_today.not_tracking": "Nie śledzę",
        "option.tracking_today.mental_notes": "W głowie / notatkach",
        "option.tracking_today.spreadsheet": "Arkusz kalkulacyjny",
        "option.tracking_today.bank_app": "Aplikacja banku",
        "option.tracking_today.budget_app": "Aplikacja do budżetu",
        "option.tracking_today.other": "Inne",
        "option.situation.paycheck_to_paycheck": "Od wypłaty do wypłaty",
        "option.situation.some_savings": "Mam trochę oszczędności",
        "option.situation.stable": "W miarę stabilnie",
        "option.situation.debt_heavy": "Długi są przytłaczające",
        "option.situation.building_wealth": "Buduję majątek",
        "option.situation.prefer_not_say": "Wolę nie mówić",
        "option.challenge.impulse_spending": "Impulsywne wydatki",
        "option.challenge.no_budget": "Brak jasnego budżetu",
        "option.challenge.debt_stress": "Spłaty długów",
        "option.challenge.irregular_income": "Nieregularny dochód",
        "option.challenge.saving_consistency": "Regularne oszczędzanie",
        "option.challenge.investing_confusion": "Zrozumienie inwestowania",
    },
    "tr": {
        "question.goal.title": "Şu anda #1 para hedefin ne?",
        "question.help_first.title": "İlk olarak hangi konuda yardım istersin?",
        "question.tracking_today.title": "Bugün paranı nasıl takip ediyorsun?",
        "question.situation.title": "Hangisi durumunu en iyi anlatıyor?",
        "question.challenge.title": "Para konusunda senin için en zor olan ne?",
        "question.goal.subtitle": "ANITA’nın planını kişiselleştirebilmesi için ✨",
        "question.challenge.subtitle": "Birini seç — uyum sağlayalım 💡",

        "option.goal.save_more": "Daha fazla biriktirmek",
        "option.goal.pay_debt": "Borçları kapatmak",
        "option.goal.emergency_fund": "Acil durum fonu oluşturmak",
        "option.goal.start_investing": "Yatırıma başlamak",
        "option.goal.stop_overspending": "Gereğinden fazla harcamayı bırakmak",
        "option.goal.big_purchase": "Büyük bir alım için plan yapmak",
        "option.help_first.budgeting": "Bütçe yapmak",
        "option.help_first.expense_tracking": "Giderleri takip etmek",
        "option.help_first.debt_strategy": "Borç ödeme stratejisi",
        "option.help_first.income_growth": "Geliri artırmak",
        "option.help_first.investing_basics": "Yatırımın temelleri",
        "option.help_first.goal_planning": "Hedefler için biriktirmek",
        "option.tracking_today.not_tracking": "Takip etmiyorum",
        "option.tracking_today.mental_notes": "Aklımda / notlarda",
        "option.tracking_today.spreadsheet": "Tablo (Spreadsheet)",
        "option.tracking_today.bank_app": "Banka uygulaması",
        "option.tracking_today.budget_app": "Bütçe uygulaması",
        "option.tracking_today.other": "Diğer",
        "option.situation.paycheck_to_paycheck": "Maaştan maaşa",
        "option.situation.some_savings": "Biraz birikimim var",
        "option.situation.stable": "Genelde stabil",
        "option.situation.debt_heavy": "Borçlar ağır geliyor",
        "option.situation.building_wealth": "Varlık biriktiriyorum",
        "option.situation.prefer_not_say": "Söylemek istemiyorum",
        "option.challenge.impulse_spending": "Dürtüsel harcama",
        "option.challenge.no_budget": "Net bir bütçe yok",
        "option.challenge.debt_stress": "Borç ödemeleri",
        "option.challenge.irregular_income": "Düzensiz gelir",
        "option.challenge.saving_consistency": "Düzenli biriktirmek",
        "option.challenge.investing_confusion": "Yatırımı anlamak",
    },
    "ru": {
        "question.goal.title": "Какая у тебя цель №1 по деньгам сейчас?",
        "question.help_first.title": "С чего начнём помощь?",
        "question.tracking_today.title": "Как ты сейчас следишь за финансами?",
        "question.situation.title": "Что лучше всего описывает твою ситуацию?",
        "question.challenge.title": "Что самое сложное в деньгах для тебя?",
        "question.goal.subtitle": "Чтобы ANITA могла персонализировать план ✨",
        "question.challenge.subtitle": "Выбери один вариант — я подстроюсь 💡",

        "option.goal.save_more": "Больше откладывать",
        "option.goal.pay_debt": "Погасить долги",
        "option.goal.emergency_fund": "Создать подушку",
        "option.goal.start_investing": "Начать инвестировать",
        "option.goal.stop_overspending": "Меньше тратить",
        "option.goal.big_purchase": "Планировать крупную покупку",
        "option.help_first.budgeting": "Бюджет",
        "option.help_first.expense_tracking": "Учёт расходов",
        "option.help_first.debt_strategy": "Стратегия по долгам",
        "option.help_first.income_growth": "Увеличить доход",
        "option.help_first.investing_basics": "Инвестиции (основы)",
        "option.help_first.goal_planning": "Копить на цели",
        "option.tracking_today.not_tracking": "Никак не веду",
        "option.tracking_today.mental_notes": "В голове / заметки",
        "option.tracking_today.spreadsheet": "Таблица",
        "option.tracking_today.bank_app": "Банк‑приложение",
        "option.tracking_today.budget_app": "Приложение для бюджета",
        "option.tracking_today.other": "Другое",
        "option.situation.paycheck_to_paycheck": "От зарплаты до зарплаты",
        "option.situation.some_savings": "Есть небольшие накопления",
        "option.situation.stable": "В целом стабильно",
        "option.situation.debt_heavy": "Долги давят",
        "option.situation.building_wealth": "Наращиваю капитал",
        "option.situation.prefer_not_say": "Предпочту не говорить",
        "option.challenge.impulse_spending": "Импульсивные траты",
        "option.challenge.no_budget": "Нет чёткого бюджета",
        "option.challenge.debt_stress": "Платежи по долгам",
        "option.challenge.irregular_income": "Нерегулярный доход",
        "option.challenge.saving_consistency": "Регулярно откладывать",
        "option.challenge.investing_confusion": "Разобраться в инвестициях",
    },
    "uk": {
        "question.goal.title": "Яка твоя ціль №1 щодо грошей зараз?",
        "question.help_first.title": "З чим хочеш допомогу спочатку?",
        "question.tracking_today.title": "Як ти зараз ведеш облік грошей?",
        "question.situation.title": "Що найкраще описує твою ситуацію?",
        "question.challenge.title": "Що найскладніше у фінансах для тебе?",
        "question.goal.subtitle": "Щоб ANITA могла персоналізувати план ✨",
        "question.challenge.subtitle": "Обери один варіант — я підлаштуюсь 💡",

        "option.goal.save_more": "Більше заощаджувати",
        "option.goal.pay_debt": "Погасити борги",
        "option.goal.emergency_fund": "Створити фінансову подушку",
        "option.goal.start_investing": "Почати інвестувати",
        "option.goal.stop_overspending": "Менше витрачати",
        "option.goal.big_purchase": "Запланувати велику покупку",
        "option.help_first.budgeting": "Бюджет",
        "option.help_first.expense_tracking": "Облік витрат",
        "option.help_first.debt_strategy": "Стратегія боргів",
        "option.help_first.income_growth": "Збільшити дохід",
        "option.help_first.investing_basics": "Інвестиції (основи)",
        "option.help_first.goal_planning": "Заощадження на цілі",
        "option.tracking_today.not_tracking": "Ніяк не веду",
        "option.tracking_today.mental_notes": "В голові / нотатки",
        "option.tracking_today.spreadsheet": "Таблиця",
        "option.tracking_today.bank_app": "Банківський додаток",
        "option.tracking_today.budget_app": "Додаток для бюджету",
        "option.tracking_today.other": "Інше",
        "option.situation.paycheck_to_paycheck": "Від зарплати до зарплати",
        "option.situation.some_savings": "Є трохи заощаджень",
        "option.situation.stable": "Загалом стабільно",
        "option.situation.debt_heavy": "Борги тиснуть",
        "option.situation.building_wealth": "Нарощую капітал",
        "option.situation.prefer_not_say": "Краще не казати",
        "option.challenge.impulse_spending": "Імпульсивні витрати",
        "option.challenge.no_budget": "Немає чіткого бюджету",
        "option.challenge.debt_stress": "Платежі за боргами",
        "option.challenge.irregular_income": "Нерегулярний дохід",
        "option.challenge.saving_consistency": "Заощаджувати регулярно",
        "option.challenge.investing_confusion": "Розібратись в інвестиціях",
    },
}

"""
Localized content for the hypoglycaemia risk panel.
One PanelTemplate per language family; adding a language only means adding
an entry to TEMPLATES.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class PanelTemplate:
    language: str
    title: str
    intro: str
    badge: str
    onset_label: str
    peak_label: str
    duration_label: str
    default_onset: str
    default_peak: str
    default_duration: str
    increase_title: str
    decrease_title: str
    default_increase: Tuple[str, ...]
    default_decrease: Tuple[str, ...]
    symptoms_title: str
    symptoms: Tuple[str, ...]
    emergency_title: str
    emergency: Tuple[str, ...]
    disclaimer: str
    # timeline card
    class_labels: Dict[str, str]
    risk_window_text: str
    aria_label: str


ENGLISH = PanelTemplate(
    language="en",
    title="Hypoglycaemia risk timeline",
    intro=(
        "Insulin lowers your blood sugar. Knowing when your insulin starts "
        "working, when it acts most strongly and how long it lasts helps you "
        "recognise when low blood sugar (hypoglycaemia) is most likely."
    ),
    badge="DiaLens",
    onset_label="Onset",
    peak_label="Peak",
    duration_label="Duration",
    default_onset="See your package leaflet for when this insulin starts to work.",
    default_peak="See your package leaflet for when this insulin has its strongest effect.",
    default_duration="See your package leaflet for how long this insulin keeps working.",
    increase_title="Situations that increase low sugar risk",
    decrease_title="Situations that may reduce insulin effect",
    default_increase=(
        "Skipping or delaying a meal after the injection",
        "Unexpected or intense physical activity",
        "Higher dose than prescribed or dosing errors",
        "Alcohol intake (especially on an empty stomach)",
        "Kidney or liver problems",
    ),
    default_decrease=(
        "Infection, fever or acute illness",
        "Stress or corticosteroid medicines",
        "Taking less insulin than prescribed",
        "Very high carbohydrate intake without dose adjustment",
    ),
    symptoms_title="Signs of low blood sugar",
    symptoms=(
        "Shaking, sweating, fast heartbeat or anxiety",
        "Sudden hunger, headache or pale skin",
        "Confusion, difficulty concentrating or blurred vision",
        "Unusual tiredness, weakness or changes in behaviour",
    ),
    emergency_title="If you think you are having hypoglycaemia",
    emergency=(
        "Check your blood glucose if you can.",
        "If low and you feel symptoms (shaky, sweaty, confused, very hungry), "
        "take fast-acting carbohydrates, for example glucose tablets, a sugary "
        "drink or juice, as described in your personal plan.",
        "Re-check after about 15 minutes and repeat fast-acting carbohydrates "
        "if still low.",
        "Once better, eat a snack or meal that contains longer-acting carbohydrates.",
        "If symptoms are severe, you pass out, or you cannot swallow safely, "
        "another person should call emergency services immediately and follow "
        "your doctor's instructions (for example, glucagon injection).",
    ),
    disclaimer=(
        "This DiaLens summary is an educational aid. It does not replace your "
        "medicine's package leaflet or advice from your healthcare professional."
    ),
    class_labels={
        "rapid-acting": "rapid acting insulin",
        "long-acting": "long acting insulin",
        "other": "insulin",
    },
    risk_window_text=(
        "You are most likely to feel low sugar symptoms roughly between "
        "{start}–{end} h after this dose, especially if you eat less than "
        "usual or exercise more."
    ),
    aria_label="DiaLens hypoglycaemia risk summary",
)

PORTUGUESE = PanelTemplate(
    language="pt",
    title="Cronologia do risco de hipoglicemia",
    intro=(
        "A insulina baixa o açúcar no sangue. Saber quando a sua insulina "
        "começa a atuar, quando tem o efeito máximo e quanto tempo dura ajuda "
        "a reconhecer quando a hipoglicemia é mais provável."
    ),
    badge="DiaLens",
    onset_label="Início",
    peak_label="Pico",
    duration_label="Duração",
    default_onset="Consulte o folheto informativo para saber quando esta insulina começa a atuar.",
    default_peak="Consulte o folheto informativo para saber quando esta insulina tem o efeito máximo.",
    default_duration="Consulte o folheto informativo para saber quanto tempo dura o efeito desta insulina.",
    increase_title="Situações que aumentam o risco de hipoglicemia",
    decrease_title="Situações que podem reduzir o efeito da insulina",
    default_increase=(
        "Saltar ou atrasar uma refeição após a injeção",
        "Atividade física inesperada ou intensa",
        "Dose superior à prescrita ou erros de dosagem",
        "Consumo de álcool (sobretudo em jejum)",
        "Problemas de rins ou de fígado",
    ),
    default_decrease=(
        "Infeção, febre ou doença aguda",
        "Stress ou medicamentos corticosteroides",
        "Tomar menos insulina do que a prescrita",
        "Ingestão muito elevada de hidratos de carbono sem ajuste da dose",
    ),
    symptoms_title="Sinais de açúcar baixo no sangue",
    symptoms=(
        "Tremores, suores, batimento cardíaco acelerado ou ansiedade",
        "Fome repentina, dor de cabeça ou palidez",
        "Confusão, dificuldade de concentração ou visão turva",
        "Cansaço invulgar, fraqueza ou alterações de comportamento",
    ),
    emergency_title="Se pensa que está a ter uma hipoglicemia",
    emergency=(
        "Meça a glicemia, se possível.",
        "Se estiver baixa e tiver sintomas, tome hidratos de carbono de ação "
        "rápida, por exemplo comprimidos de glucose, uma bebida açucarada ou "
        "sumo, conforme o seu plano pessoal.",
        "Volte a medir após cerca de 15 minutos e repita se continuar baixa.",
        "Quando melhorar, coma um lanche ou refeição com hidratos de carbono "
        "de absorção lenta.",
        "Se os sintomas forem graves, perder a consciência ou não conseguir "
        "engolir em segurança, outra pessoa deve ligar imediatamente para o "
        "número de emergência e seguir as instruções do seu médico (por "
        "exemplo, injeção de glucagom).",
    ),
    disclaimer=(
        "Este resumo DiaLens é um apoio educativo. Não substitui o folheto "
        "informativo do medicamento nem o aconselhamento do seu profissional "
        "de saúde."
    ),
    class_labels={
        "rapid-acting": "insulina de ação rápida",
        "long-acting": "insulina de ação prolongada",
        "other": "insulina",
    },
    risk_window_text=(
        "É mais provável sentir sintomas de açúcar baixo entre "
        "{start}–{end} h após esta dose, sobretudo se comer menos do que o "
        "habitual ou fizer mais exercício."
    ),
    aria_label="Resumo DiaLens do risco de hipoglicemia",
)

SPANISH = PanelTemplate(
    language="es",
    title="Cronología del riesgo de hipoglucemia",
    intro=(
        "La insulina reduce el azúcar en sangre. Saber cuándo empieza a actuar "
        "su insulina, cuándo alcanza su efecto máximo y cuánto dura le ayuda a "
        "reconocer cuándo es más probable una hipoglucemia."
    ),
    badge="DiaLens",
    onset_label="Inicio",
    peak_label="Pico",
    duration_label="Duración",
    default_onset="Consulte el prospecto para saber cuándo empieza a actuar esta insulina.",
    default_peak="Consulte el prospecto para saber cuándo alcanza esta insulina su efecto máximo.",
    default_duration="Consulte el prospecto para saber cuánto tiempo actúa esta insulina.",
    increase_title="Situaciones que aumentan el riesgo de hipoglucemia",
    decrease_title="Situaciones que pueden reducir el efecto de la insulina",
    default_increase=(
        "Saltarse o retrasar una comida después de la inyección",
        "Actividad física inesperada o intensa",
        "Dosis mayor de la prescrita o errores de dosificación",
        "Consumo de alcohol (sobre todo en ayunas)",
        "Problemas de riñón o de hígado",
    ),
    default_decrease=(
        "Infección, fiebre o enfermedad aguda",
        "Estrés o medicamentos corticosteroides",
        "Usar menos insulina de la prescrita",
        "Ingesta muy alta de hidratos de carbono sin ajustar la dosis",
    ),
    symptoms_title="Señales de azúcar bajo en sangre",
    symptoms=(
        "Temblores, sudoración, latidos rápidos o ansiedad",
        "Hambre repentina, dolor de cabeza o palidez",
        "Confusión, dificultad para concentrarse o visión borrosa",
        "Cansancio inusual, debilidad o cambios de comportamiento",
    ),
    emergency_title="Si cree que está sufriendo una hipoglucemia",
    emergency=(
        "Mida su glucosa en sangre si puede.",
        "Si está baja y tiene síntomas, tome hidratos de carbono de acción "
        "rápida, por ejemplo comprimidos de glucosa, una bebida azucarada o "
        "zumo, según su plan personal.",
        "Vuelva a medir tras unos 15 minutos y repita si sigue baja.",
        "Cuando se encuentre mejor, tome un tentempié o comida con hidratos "
        "de carbono de absorción lenta.",
        "Si los síntomas son graves, pierde el conocimiento o no puede tragar "
        "con seguridad, otra persona debe llamar inmediatamente a emergencias "
        "y seguir las instrucciones de su médico (por ejemplo, inyección de "
        "glucagón).",
    ),
    disclaimer=(
        "Este resumen de DiaLens es una ayuda educativa. No sustituye al "
        "prospecto del medicamento ni al consejo de su profesional sanitario."
    ),
    class_labels={
        "rapid-acting": "insulina de acción rápida",
        "long-acting": "insulina de acción prolongada",
        "other": "insulina",
    },
    risk_window_text=(
        "Es más probable que note síntomas de azúcar bajo entre "
        "{start}–{end} h después de esta dosis, sobre todo si come menos de lo "
        "habitual o hace más ejercicio."
    ),
    aria_label="Resumen DiaLens del riesgo de hipoglucemia",
)

DANISH = PanelTemplate(
    language="da",
    title="Tidslinje for risiko for hypoglykæmi",
    intro=(
        "Insulin sænker dit blodsukker. Når du ved, hvornår din insulin begynder "
        "at virke, hvornår den virker kraftigst, og hvor længe den virker, er "
        "det lettere at genkende, hvornår lavt blodsukker er mest sandsynligt."
    ),
    badge="DiaLens",
    onset_label="Virkningsstart",
    peak_label="Maksimal virkning",
    duration_label="Varighed",
    default_onset="Se indlægssedlen for, hvornår denne insulin begynder at virke.",
    default_peak="Se indlægssedlen for, hvornår denne insulin virker kraftigst.",
    default_duration="Se indlægssedlen for, hvor længe denne insulin virker.",
    increase_title="Situationer, der øger risikoen for lavt blodsukker",
    decrease_title="Situationer, der kan nedsætte insulinens virkning",
    default_increase=(
        "At springe et måltid over eller udskyde det efter injektionen",
        "Uventet eller hård fysisk aktivitet",
        "Højere dosis end ordineret eller doseringsfejl",
        "Indtagelse af alkohol (især på tom mave)",
        "Nyre- eller leverproblemer",
    ),
    default_decrease=(
        "Infektion, feber eller akut sygdom",
        "Stress eller binyrebarkhormoner",
        "At tage mindre insulin end ordineret",
        "Meget stort kulhydratindtag uden dosisjustering",
    ),
    symptoms_title="Tegn på lavt blodsukker",
    symptoms=(
        "Rysten, sveden, hjertebanken eller uro",
        "Pludselig sult, hovedpine eller bleghed",
        "Forvirring, koncentrationsbesvær eller sløret syn",
        "Usædvanlig træthed, svaghed eller ændret adfærd",
    ),
    emergency_title="Hvis du tror, du har lavt blodsukker",
    emergency=(
        "Mål dit blodsukker, hvis du kan.",
        "Hvis det er lavt, og du har symptomer, så spis eller drik hurtigtvirkende "
        "kulhydrater, for eksempel druesukker, en sukkerholdig drik eller juice, "
        "som beskrevet i din personlige plan.",
        "Mål igen efter cirka 15 minutter, og gentag, hvis det stadig er lavt.",
        "Når du har det bedre, så spis et mellemmåltid eller et måltid med "
        "langsomt optagelige kulhydrater.",
        "Hvis symptomerne er alvorlige, du besvimer eller ikke kan synke sikkert, "
        "skal en anden person straks ringe 112 og følge lægens anvisninger "
        "(for eksempel glukagoninjektion).",
    ),
    disclaimer=(
        "Dette DiaLens-resumé er et undervisningsværktøj. Det erstatter ikke "
        "lægemidlets indlægsseddel eller råd fra din læge eller sygeplejerske."
    ),
    class_labels={
        "rapid-acting": "hurtigtvirkende insulin",
        "long-acting": "langtidsvirkende insulin",
        "other": "insulin",
    },
    risk_window_text=(
        "Du vil sandsynligvis mærke symptomer på lavt blodsukker cirka "
        "{start}–{end} timer efter denne dosis, især hvis du spiser mindre end "
        "normalt eller motionerer mere."
    ),
    aria_label="DiaLens-resumé af risikoen for hypoglykæmi",
)

TEMPLATES: Dict[str, PanelTemplate] = {
    template.language: template
    for template in (ENGLISH, PORTUGUESE, SPANISH, DANISH)
}

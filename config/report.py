"""
config/report.py
────────────────
Static report content: issuer identity, signatories, fallback texts,
measurement constants, and the fixed narrative sections.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Signatory:
    name: str
    role: str
    email: str
    phones: tuple[str, ...] = ()


# ── Issuer ────────────────────────────────────────────────────────────────────
ISSUER_NAME = "JundPred - Manutenção Preditiva"
ISSUER_CITY = "Jundiaí"
ISSUER_FOOTER = "JundPred Manutenção Preditiva · Jundiaí/SP · (11) 2817-0616"

COMMERCIAL_SIGNATORY = Signatory(
    name="Luís Henrique Guimarães Stefani",
    role="Diretor Comercial",
    email="luis@jundpred.com.br",
    phones=("Tel.: (11) 2817-0616", "Cel: (11) 98112-2244"),
)

# Used when the payload carries no responsible user
DEFAULT_RESPONSIBLE = Signatory(
    name="Nome do Responsável",
    role="DEPTO. DE PREDITIVA",
    email="email@jundpred.com.br",
    phones=("Tel.: (11) 2817-0616",),
)

DEFAULT_ATTENTION = "Departamento de Manutenção"
DEFAULT_INSPECTION_TYPE = "TERMOGRÁFICA"

# ── Operational report defaults ───────────────────────────────────────────────
DEFAULT_PROBLEM = "Verificar equipamento"
DEFAULT_RECOMMENDATION = "Realizar manutenção preventiva"
NOT_AVAILABLE = "N/A"
EMISSIVITY = "0.95"
MEASUREMENT_DISTANCE = "≈1 m"
OBSERVATION_PREFIX = "VIDE R.O."

# ── Fixed narrative sections ──────────────────────────────────────────────────
TECHNICAL_SECTIONS: list[tuple[str, str]] = [
    (
        "1 - PRINCÍPIOS DA TERMOGRAFIA:",
        "A técnica de inspeção empregada é um tipo de ensaio não destrutivo que permite a "
        "determinação de temperaturas e o exame das distribuições de calor em componentes ou "
        "equipamentos de processos a partir da radiação infravermelha emitida pelos mesmos. "
        "As imagens térmicas resultantes, denominadas termogramas, são mostradas a cores "
        "neste relatório.",
    ),
    (
        "2 - APLICAÇÕES",
        "A Termografia se aplica aos programas de manutenção preventiva e preditiva nas mais "
        "diversas indústrias, tais como: Papel, Plásticos, Têxtil, Celulose, Siderúrgica, "
        "Petroquímica, Vidreira, Cimento, Concessionárias de Energia Elétrica, Mineração, etc.",
    ),
]

LOCATION_CRITERIA: list[str] = [
    "No instante em que inspeciona um componente elétrico, o inspetor da Jundpred realiza uma "
    "rigorosa seleção preliminar para determinar se este componente se encontra em situação "
    "normal ou não.",
    "Esta pré-seleção é feita utilizando-se equipamentos Termovisores de última geração e "
    "equipamentos adicionais tais como Anemômetro e Alicate Amperímetro de alta precisão.",
    "Nesta fase, são anotadas a temperatura do componente, a temperatura ambiente, a "
    "temperatura máxima admissível do componente, a velocidade do vento, a carga nominal e a "
    "carga do componente no momento da medição.",
]

CLOSING_TEXT = (
    "Afirmamos que são boas as condições gerais dos painéis e equipamentos que foram objeto "
    "desta inspeção. Ressaltamos que é importante que as recomendações, por nós apresentadas "
    "neste relatório, sejam devidamente seguidas para que os problemas atuais que detectamos "
    "não se agravem e para que se evitem outros problemas."
)

SERVICES: list[tuple[str, str]] = [
    ("Análise de Vibrações", "Off-line e on-line, solo e estrutural"),
    ("Inspeção Termográfica", "Painéis, cabines, fornos, mancais, etc."),
    ("Alinhamento a Laser", "De eixos e polias + calços calibrados"),
    ("Balanceamento Dinâmico", "Realizado no local – 1 a 4 planos"),
    ("ODS (Estrutural)", "Análise de torção de base com correção"),
    ("MCA – Inspeção Elétrica", "Avaliação de circuitos em motores elétricos"),
    ("Análise de Óleo", "Lubrificante / pacote industrial"),
    ("Técnicas Multiparâmetro", "Aplicação de diversas técnicas preditivas"),
    ("Treinamentos de Preditiva", "Análise de vibração e Termografia – N1"),
    ("Monitoramento Online", "Sensor online de vibração"),
    ("Inspeção Ultrassônica", "Ar comprimido, vapor, gases e elétrica"),
    ("Inspeção Sensitiva", "Abordagem para identificar falhas incipientes"),
]

# ── Temperature reference page ────────────────────────────────────────────────
TEMPERATURE_REFERENCE_TITLE = "TABELA DE TEMPERATURAS MÁXIMAS ADMISSÍVEIS"
TEMPERATURE_REFERENCE_NOTE = (
    "Valores de referência para componentes em regime permanente. A temperatura admissível "
    "informada em cada relatório operacional prevalece sobre esta tabela."
)
TEMPERATURE_REFERENCE: list[tuple[str, str]] = [
    ("Cabos com isolação em PVC", "70 °C"),
    ("Cabos com isolação em EPR / XLPE", "90 °C"),
    ("Conexões e barramentos de cobre", "90 °C"),
    ("Conexões e barramentos de alumínio", "80 °C"),
    ("Terminais prensados", "75 °C"),
    ("Fusíveis (corpo)", "100 °C"),
    ("Disjuntores e contatores (terminais)", "90 °C"),
    ("Chaves seccionadoras (contatos)", "90 °C"),
    ("Transformadores a seco (enrolamento classe F)", "155 °C"),
    ("Transformadores a óleo (topo do óleo)", "95 °C"),
    ("Motores elétricos (carcaça, classe F)", "100 °C"),
    ("Mancais de rolamento", "80 °C"),
]

"""Prompt templates, the declared suggestion schema and localized messages.

Templates use str.format placeholders only; JSON payloads are substituted
as values so their braces never reach the formatter.
"""

from __future__ import annotations

from typing import Any, Sequence

INSIGHTS_TEMPLATE: dict[str, str] = {
    "es": """
Eres un analista de datos experto. Tu tarea es proporcionar un análisis conciso y útil de un conjunto de datos para la predicción de ventas.

Aquí está la información del conjunto de datos:
1.  **Columnas**: {headers}
2.  **Estadísticas Descriptivas (para columnas numéricas)**:
    ```json
{stats}
    ```
3.  **Filas de datos de muestra**:
    ```json
{sample}
    ```

Por favor, proporciona un análisis que incluya:
-   Una breve descripción general de los datos.
-   Posibles relaciones o patrones interesantes que observes entre las variables.
-   Recomendaciones sobre qué variables podrían ser buenos predictores para un modelo de regresión.
-   Advertencias sobre posibles problemas como multicolinealidad, valores atípicos (outliers) o la necesidad de transformar alguna variable.

Formatea tu respuesta en Markdown para una fácil lectura. Sé claro, conciso y orientado a la acción.
""",
    "en": """
You are an expert data analyst. Your task is to provide a concise, useful analysis of a dataset intended for sales prediction.

Dataset information:
1.  **Columns**: {headers}
2.  **Descriptive statistics (numeric columns)**:
    ```json
{stats}
    ```
3.  **Sample rows**:
    ```json
{sample}
    ```

Please provide an analysis that includes:
-   A short overview of the data.
-   Interesting relationships or patterns you observe between variables.
-   Recommendations on which variables could be good predictors for a regression model.
-   Warnings about potential problems such as multicollinearity, outliers or variables that need transforming.

Format your answer in Markdown for easy reading. Be clear, concise and action-oriented.
""",
}

SUGGESTIONS_TEMPLATE: dict[str, str] = {
    "es": """
Analiza los siguientes encabezados de columnas y datos de muestra de un conjunto de datos.
Tu tarea es actuar como un científico de datos y sugerir la mejor variable dependiente (objetivo) y las mejores variables independientes (predictores) para construir un modelo de predicción de ventas.

La variable dependiente debe ser la que probablemente represente las ventas (ej. 'ventas', 'ingresos', 'unidades_vendidas').
Las variables independientes deben ser aquellas que lógicamente podrían influir en la variable de ventas.

Encabezados: {headers}

Primeras {n_rows} filas de datos de muestra:
```json
{sample}
```

Devuelve tu sugerencia únicamente en formato JSON.
""",
    "en": """
Analyze the following column headers and sample data from a dataset.
Act as a data scientist and suggest the best dependent (target) variable and the best independent (predictor) variables for building a sales prediction model.

The dependent variable should be the one most likely to represent sales (e.g. 'sales', 'revenue', 'units_sold').
The independent variables should be those that could logically influence the sales variable.

Headers: {headers}

First {n_rows} sample rows:
```json
{sample}
```

Return your suggestion only as JSON.
""",
}

_SCHEMA_DESCRIPTIONS: dict[str, tuple[str, str]] = {
    "es": (
        "El nombre de la columna que mejor representa la variable dependiente (ej. ventas).",
        "Una lista de nombres de columnas que son buenos predictores para la variable dependiente.",
    ),
    "en": (
        "Name of the column that best represents the dependent variable (e.g. sales).",
        "List of column names that are good predictors of the dependent variable.",
    ),
}

MESSAGES: dict[str, dict[str, str]] = {
    "es": {
        "error_prefix": "Error",
        "insights_missing_key": (
            "Error: La clave API no está configurada. "
            "Por favor, configúrela en las variables de entorno (SALES_ADVISOR_API_KEY o GEMINI_API_KEY)."
        ),
        "insights_failed": (
            "Error al contactar el servicio de generación. "
            "Por favor, revisa el registro para más detalles. Detalles: {detail}"
        ),
        "insights_missing_key_detail": "No se ha configurado ninguna clave API; no se envió la solicitud.",
        "suggest_missing_key": "La clave API no está configurada.",
        "suggest_failed": "Error al obtener sugerencias de la IA. Detalles: {detail}",
        "bad_shape": "La respuesta de la IA no tiene el formato esperado.",
        "bad_json": "La respuesta de la IA no es JSON válido: {detail}",
        "empty_response": "La respuesta de la IA está vacía.",
        "unknown_columns": "La respuesta de la IA menciona columnas desconocidas: {names}",
    },
    "en": {
        "error_prefix": "Error",
        "insights_missing_key": (
            "Error: The API key is not configured. "
            "Please set it in the environment (SALES_ADVISOR_API_KEY or GEMINI_API_KEY)."
        ),
        "insights_failed": (
            "Error contacting the generation service. "
            "Check the log for more details. Details: {detail}"
        ),
        "insights_missing_key_detail": "No API key is configured; the request was not sent.",
        "suggest_missing_key": "The API key is not configured.",
        "suggest_failed": "Error getting suggestions from the AI. Details: {detail}",
        "bad_shape": "The AI response does not have the expected format.",
        "bad_json": "The AI response is not valid JSON: {detail}",
        "empty_response": "The AI response is empty.",
        "unknown_columns": "The AI response mentions unknown columns: {names}",
    },
}


def message(language: str, key: str, **fields: Any) -> str:
    text = MESSAGES[language][key]
    return text.format(**fields) if fields else text


def render_insights_prompt(language: str, headers: Sequence[str], stats_text: str, sample_text: str) -> str:
    return INSIGHTS_TEMPLATE[language].format(
        headers=", ".join(headers),
        stats=stats_text,
        sample=sample_text,
    )


def render_suggestions_prompt(language: str, headers: Sequence[str], sample_text: str, n_rows: int) -> str:
    return SUGGESTIONS_TEMPLATE[language].format(
        headers=", ".join(headers),
        sample=sample_text,
        n_rows=n_rows,
    )


def suggestion_schema(language: str) -> dict[str, Any]:
    """JSON schema declared to the service for variable suggestions."""
    dep_desc, indep_desc = _SCHEMA_DESCRIPTIONS[language]
    return {
        "type": "object",
        "properties": {
            "dependentVar": {"type": "string", "description": dep_desc},
            "independentVars": {
                "type": "array",
                "items": {"type": "string"},
                "description": indep_desc,
            },
        },
        "required": ["dependentVar", "independentVars"],
    }

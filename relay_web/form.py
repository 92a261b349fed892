FORM_DEFAULTS = {
    "category": "software",
    "subcategory": "email",
    "urgency": "2",
    "impact": "2",
    "caller_id": "8fe6a1a983821210e5f1b3a6feaad309",
    "cmdb_ci": "ded5656983821210e5f1b3a6feaad3c6",
}

FORM_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
	<meta charset="UTF-8">
	<title>Create a new ServiceNow Incident</title>
</head>
<body>
	<h1>Create a new Incident</h1>
	<form action="/submit" method="post">
		<label for="short_description">short_description:</label><br>
		<input type="text" id="short_description" name="short_description" required><br><br>

		<label for="category">category:</label><br>
		<input type="text" id="category" name="category" value="{category}"><br><br>

		<label for="subcategory">subcategory:</label><br>
		<input type="text" id="subcategory" name="subcategory" value="{subcategory}"><br><br>

		<label for="urgency">urgency:</label><br>
		<input type="text" id="urgency" name="urgency" value="{urgency}"><br><br>

		<label for="impact">impact:</label><br>
		<input type="text" id="impact" name="impact" value="{impact}"><br><br>

		<label for="caller_id">caller_id:</label><br>
		<input type="text" id="caller_id" name="caller_id" value="{caller_id}"><br><br>

		<label for="description">description:</label><br>
		<textarea id="description" name="description"></textarea><br><br>

		<label for="cmdb_ci">cmdb_ci:</label><br>
		<input type="text" id="cmdb_ci" name="cmdb_ci" value="{cmdb_ci}"><br><br>

		<hr>
		<p>Login credentials:</p>

		<label for="username">username (optional, if no API key):</label><br>
		<input type="text" id="username" name="username"><br><br>

		<label for="password">password (optional, if no API key):</label><br>
		<input type="password" id="password" name="password"><br><br>

		<label for="apikey">API key (optional, if no username/password):</label><br>
		<input type="text" id="apikey" name="apikey"><br><br>

		<input type="submit" value="Create Incident">
	</form>
</body>
</html>
"""


def render_form() -> str:
    """Render the incident form with its pre-filled defaults."""
    return FORM_TEMPLATE.format(**FORM_DEFAULTS)

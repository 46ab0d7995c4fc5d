"""In-memory todo list served over HTTP."""